"""
Synthetic keystroke injection through platform scripting helpers.
"""

from keystrokes.base import KeystrokeInjector
from keystrokes.errors import (
    HelperLaunchError,
    KeystrokeError,
    PlatformUnavailableError,
)
from keystrokes.factory import get_injector_class, get_keystroke_injector
from keystrokes.process import HelperResult, run_helper

__all__ = [
    'HelperLaunchError',
    'HelperResult',
    'KeystrokeError',
    'KeystrokeInjector',
    'PlatformUnavailableError',
    'get_injector_class',
    'get_keystroke_injector',
    'run_helper',
]
