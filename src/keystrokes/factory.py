"""
Platform-specific keystroke injector factory.
"""

import platform
from typing import Optional, Type

from keystrokes.base import KeystrokeInjector


def get_injector_class(system: Optional[str] = None) -> Type[KeystrokeInjector]:
    """
    Get the KeystrokeInjector implementation for a platform.

    Platforms without a scripting strategy get ``UnsupportedKeystrokes``
    instead of an error, so callers decide how to report it.
    """
    system = system or platform.system()

    if system == "Darwin":
        from keystrokes.macos import MacOSKeystrokes
        return MacOSKeystrokes
    elif system == "Windows":
        from keystrokes.windows import WindowsKeystrokes
        return WindowsKeystrokes
    else:
        from keystrokes.unsupported import UnsupportedKeystrokes
        return UnsupportedKeystrokes


def get_keystroke_injector(
    system: Optional[str] = None,
    *,
    osascript: str = "osascript",
    powershell: str = "powershell",
    settle_delay: float = 0.01,
    copy_delay: float = 0.02,
    timeout: Optional[float] = None,
) -> KeystrokeInjector:
    system = system or platform.system()
    injector_class = get_injector_class(system)

    if injector_class.name == "macos":
        return injector_class(
            osascript=osascript,
            settle_delay=settle_delay,
            copy_delay=copy_delay,
            timeout=timeout,
        )
    if injector_class.name == "windows":
        return injector_class(
            powershell=powershell,
            settle_delay=settle_delay,
            copy_delay=copy_delay,
            timeout=timeout,
        )
    return injector_class(system)
