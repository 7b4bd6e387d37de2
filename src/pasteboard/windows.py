import time

try:
    import pywintypes
    import win32clipboard as wc
    HAS_WIN32 = True
except ImportError:
    HAS_WIN32 = False

from pasteboard.base import NO_TEXT_MESSAGE, ClipboardBackend, ClipboardError, NoTextError


class WindowsClipboard(ClipboardBackend):

    name = "windows"
    open_attempts = 3

    def read_text(self) -> str:
        self._open()
        try:
            if not wc.IsClipboardFormatAvailable(wc.CF_UNICODETEXT):
                raise NoTextError(NO_TEXT_MESSAGE)
            text = wc.GetClipboardData(wc.CF_UNICODETEXT)
        except pywintypes.error as exc:
            raise ClipboardError(f"GetClipboardData failed: {exc.strerror}") from exc
        finally:
            self._close()

        if text is None:
            raise NoTextError(NO_TEXT_MESSAGE)
        return text

    def write_text(self, text: str) -> None:
        self._open()
        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(wc.CF_UNICODETEXT, text)
        except pywintypes.error as exc:
            raise ClipboardError(f"SetClipboardData failed: {exc.strerror}") from exc
        finally:
            self._close()

    def _open(self) -> None:
        if not HAS_WIN32:
            raise ClipboardError("pywin32 is not available; install pywin32")

        # another process may hold the clipboard for a few milliseconds
        last_error = None
        for _ in range(self.open_attempts):
            try:
                wc.OpenClipboard()
                return
            except pywintypes.error as exc:
                last_error = exc
                time.sleep(0.05)
        raise ClipboardError(
            f"Could not open the clipboard: {getattr(last_error, 'strerror', last_error)}")

    def _close(self) -> None:
        try:
            wc.CloseClipboard()
        except pywintypes.error:
            pass
