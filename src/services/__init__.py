"""Service layer for selection-bridge."""

from .clipboard_service import ClipboardService
from .commands import CommandRegistry, build_registry
from .config import BridgeConfig
from .results import CommandResult
from .selection_service import SelectionService

__all__ = [
    "BridgeConfig",
    "ClipboardService",
    "CommandRegistry",
    "CommandResult",
    "SelectionService",
    "build_registry",
]
