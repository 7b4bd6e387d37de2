import logging

from pasteboard import ClipboardBackend, ClipboardError, NoTextError
from pasteboard.base import NO_TEXT_MESSAGE
from services.results import CommandResult

logger = logging.getLogger(__name__)


class ClipboardService:

    def __init__(self, backend: ClipboardBackend) -> None:
        self.backend = backend

    def copy_to_clipboard(self, text: str) -> CommandResult:
        if not isinstance(text, str):
            return CommandResult.failure(
                f"Failed to copy text: expected a string, got {type(text).__name__}")

        try:
            self.backend.write_text(text)
        except ClipboardError as exc:
            logger.error("Failed to copy text: %s", exc)
            return CommandResult.failure(f"Failed to copy text: {exc}")

        logger.info("Copied text to clipboard: %d characters", len(text))
        return CommandResult.success(f"Text copied: {len(text)} characters")

    def read_clipboard(self) -> CommandResult:
        try:
            text = self.backend.read_text()
        except NoTextError:
            logger.info(NO_TEXT_MESSAGE)
            return CommandResult.failure(NO_TEXT_MESSAGE)
        except ClipboardError as exc:
            logger.error("Failed to read clipboard: %s", exc)
            return CommandResult.failure(f"Failed to read clipboard: {exc}")

        if not text.strip():
            logger.info(NO_TEXT_MESSAGE)
            return CommandResult.failure(NO_TEXT_MESSAGE)

        logger.info("Read text from clipboard: %d characters", len(text))
        return CommandResult.success(text)
