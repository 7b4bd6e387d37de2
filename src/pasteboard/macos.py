try:
    from AppKit import NSPasteboard, NSPasteboardTypeString
    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False

from pasteboard.base import NO_TEXT_MESSAGE, ClipboardBackend, ClipboardError, NoTextError


class MacOSClipboard(ClipboardBackend):

    name = "macos"

    def read_text(self) -> str:
        pasteboard = self._general_pasteboard()

        types = pasteboard.types() or []
        if NSPasteboardTypeString not in types:
            raise NoTextError(NO_TEXT_MESSAGE)

        text = pasteboard.stringForType_(NSPasteboardTypeString)
        if text is None:
            raise NoTextError(NO_TEXT_MESSAGE)
        return str(text)

    def write_text(self, text: str) -> None:
        pasteboard = self._general_pasteboard()
        pasteboard.clearContents()
        if not pasteboard.setString_forType_(text, NSPasteboardTypeString):
            raise ClipboardError("NSPasteboard refused the string")

    def _general_pasteboard(self):
        if not HAS_APPKIT:
            raise ClipboardError(
                "AppKit is not available; install pyobjc-framework-Cocoa")
        return NSPasteboard.generalPasteboard()
