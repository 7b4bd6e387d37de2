from pasteboard.base import ClipboardBackend, ClipboardError


class UnsupportedClipboard(ClipboardBackend):

    name = "unsupported"

    def __init__(self, system: str = "") -> None:
        self.system = system

    def read_text(self) -> str:
        raise ClipboardError(f"Clipboard is not supported on platform '{self.system}'")

    def write_text(self, text: str) -> None:
        raise ClipboardError(f"Clipboard is not supported on platform '{self.system}'")
