from abc import ABC, abstractmethod

from keystrokes.process import HelperResult


class KeystrokeInjector(ABC):

    name = "base"

    @abstractmethod
    def send_copy_chord(self) -> HelperResult:
        """Send the platform copy accelerator to the focused application."""

    @abstractmethod
    def broadcast_escape(self) -> HelperResult:
        """Send escape to other applications to drop their selections."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
