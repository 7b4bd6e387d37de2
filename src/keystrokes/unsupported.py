from keystrokes.base import KeystrokeInjector
from keystrokes.errors import PlatformUnavailableError
from keystrokes.process import HelperResult


class UnsupportedKeystrokes(KeystrokeInjector):

    name = "unsupported"

    def __init__(self, system: str = "") -> None:
        self.system = system

    def send_copy_chord(self) -> HelperResult:
        raise PlatformUnavailableError(
            f"No copy keystroke strategy for platform '{self.system}'")

    def broadcast_escape(self) -> HelperResult:
        raise PlatformUnavailableError(
            f"No escape broadcast strategy for platform '{self.system}'")
