"""
Platform-specific clipboard factory.

This module picks the clipboard backend for the platform the process runs
on. The choice happens at startup, and callers may pass an explicit system
name to select another implementation (tests, or a configured override).
"""

import platform
from typing import Optional, Type

from pasteboard.base import ClipboardBackend

_X11_SYSTEMS = {"Linux", "FreeBSD", "OpenBSD", "NetBSD"}


def get_clipboard_class(system: Optional[str] = None) -> Type[ClipboardBackend]:
    """
    Get the ClipboardBackend implementation for a platform.

    Args:
        system: A ``platform.system()`` style name. Defaults to the current one.

    Returns:
        Type[ClipboardBackend]: The platform-specific backend class
    """
    system = system or platform.system()

    if system == "Windows":
        from pasteboard.windows import WindowsClipboard
        return WindowsClipboard
    elif system in _X11_SYSTEMS:
        from pasteboard.linux import LinuxClipboard
        return LinuxClipboard
    elif system == "Darwin":
        from pasteboard.macos import MacOSClipboard
        return MacOSClipboard
    else:
        from pasteboard.unsupported import UnsupportedClipboard
        return UnsupportedClipboard


def get_clipboard_backend(system: Optional[str] = None, **options) -> ClipboardBackend:
    """
    Create the clipboard backend for a platform.

    Extra keyword options are forwarded to backends that accept them
    (``timeout`` for the Linux command line tools).
    """
    system = system or platform.system()
    backend_class = get_clipboard_class(system)

    if backend_class.name == "linux":
        return backend_class(**options)
    if backend_class.name == "unsupported":
        return backend_class(system)
    return backend_class()
