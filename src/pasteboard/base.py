from abc import ABC, abstractmethod


NO_TEXT_MESSAGE = "No text data in clipboard"


class ClipboardError(Exception):
    """The clipboard service rejected a read or write."""


class NoTextError(ClipboardError):
    """The clipboard holds no text, only other content or nothing at all."""


class ClipboardBackend(ABC):

    name = "base"

    @abstractmethod
    def read_text(self) -> str:
        """Return the clipboard text.

        Raises:
            ClipboardError: If the clipboard holds no text or cannot be read.
        """

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Replace the clipboard content with ``text``.

        Raises:
            ClipboardError: If the clipboard rejects the write.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
