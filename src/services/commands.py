import inspect
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from services.results import CommandResult

logger = logging.getLogger(__name__)

CommandHandler = Callable[..., CommandResult]


class UnknownCommandError(KeyError):
    pass


class CommandRegistry:
    """Name to handler table the GUI shell invokes native commands through."""

    def __init__(self) -> None:
        self._handlers: Dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        if name in self._handlers:
            raise ValueError(f"Command already registered: {name}")
        self._handlers[name] = handler
        logger.debug("Registered command %s", name)

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def get(self, name: str) -> CommandHandler:
        try:
            return self._handlers[name]
        except KeyError:
            raise UnknownCommandError(name) from None

    def invoke(self, name: str, args: Optional[Mapping[str, Any]] = None) -> CommandResult:
        args = dict(args or {})
        try:
            handler = self.get(name)
        except UnknownCommandError:
            logger.error("Unknown command: %s", name)
            return CommandResult.failure(f"Unknown command: {name}")

        try:
            inspect.signature(handler).bind(**args)
        except TypeError as exc:
            logger.error("Invalid arguments for %s: %s", name, exc)
            return CommandResult.failure(f"Invalid arguments for {name}: {exc}")

        try:
            return handler(**args)
        except Exception as exc:
            logger.exception("Command %s raised", name)
            return CommandResult.failure(f"{name} failed: {exc}")


def build_registry(clipboard_service, selection_service) -> CommandRegistry:
    registry = CommandRegistry()
    registry.register("copy_to_clipboard", clipboard_service.copy_to_clipboard)
    registry.register("read_clipboard", clipboard_service.read_clipboard)
    registry.register("auto_copy_selection", selection_service.auto_copy_selection)
    registry.register("clear_other_selections", selection_service.clear_other_selections)
    return registry
