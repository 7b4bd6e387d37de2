"""
Cross-platform clipboard text access.

This package provides text read/write on the system clipboard across
different operating systems through a unified interface.
"""

from pasteboard.base import ClipboardBackend, ClipboardError, NoTextError
from pasteboard.factory import get_clipboard_class, get_clipboard_backend

__all__ = [
    'ClipboardBackend',
    'ClipboardError',
    'NoTextError',
    'get_clipboard_class',
    'get_clipboard_backend',
]
