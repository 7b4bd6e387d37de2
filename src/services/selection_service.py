import logging

from keystrokes import (
    HelperLaunchError,
    KeystrokeInjector,
    PlatformUnavailableError,
)
from services.results import CommandResult

logger = logging.getLogger(__name__)


class SelectionService:
    """Keystroke commands that act on text selected in other applications.

    Copy simulation and escape broadcast treat a missing platform strategy
    differently: the caller of ``auto_copy_selection`` waits on the copy, so
    unavailability is an error; clearing selections is best effort, so it
    is reported as a successful no-op.
    """

    def __init__(self, injector: KeystrokeInjector) -> None:
        self.injector = injector

    def auto_copy_selection(self) -> CommandResult:
        logger.info("Auto-copying currently selected text")
        try:
            result = self.injector.send_copy_chord()
        except PlatformUnavailableError as exc:
            logger.info("Auto-copy not implemented: %s", exc)
            return CommandResult.failure("Auto-copy is unavailable on this platform")
        except HelperLaunchError as exc:
            logger.error("Copy keystroke helper could not run: %s", exc)
            return CommandResult.failure(f"Failed to copy selection automatically: {exc}")

        if result.stdout:
            logger.debug("Copy helper stdout: %s", result.stdout)
        if result.stderr:
            logger.warning("Copy helper stderr: %s", result.stderr)

        if not result.ok:
            logger.warning("Copy helper failed with exit code %s", result.returncode)
            return CommandResult.failure(
                f"Copy keystroke helper failed with exit code {result.returncode}")

        logger.info("Sent copy keystroke")
        return CommandResult.success("Selected text copied automatically")

    def clear_other_selections(self) -> CommandResult:
        logger.info("Clearing other text selections")
        try:
            result = self.injector.broadcast_escape()
        except PlatformUnavailableError as exc:
            logger.info("Selection clearing not implemented: %s", exc)
            return CommandResult.success("Selection clearing is unavailable on this platform")
        except HelperLaunchError as exc:
            logger.error("Escape helper could not run: %s", exc)
            return CommandResult.failure(f"Failed to clear selections: {exc}")

        if not result.ok:
            logger.warning(
                "Escape helper exited with %s: %s", result.returncode, result.stderr)
            return CommandResult.success("Selections partially cleared", partial=True)

        logger.info("Cleared selections in other applications")
        return CommandResult.success("Cleared selections in other applications")
