import sys
from pathlib import Path

import pytest

# Make src importable
REPO_ROOT = Path(__file__).resolve().parent.parent
SRC = REPO_ROOT / "src"
sys.path.insert(0, str(SRC))

from keystrokes import KeystrokeInjector, HelperResult  # noqa: E402
from pasteboard import ClipboardBackend, ClipboardError, NoTextError  # noqa: E402
from pasteboard.base import NO_TEXT_MESSAGE  # noqa: E402


class MemoryClipboard(ClipboardBackend):
    """Clipboard held in memory; ``None`` stands for non-text content."""

    name = "memory"

    def __init__(self, text=None, fail_reads=None, fail_writes=None):
        self.text = text
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def read_text(self) -> str:
        if self.fail_reads:
            raise ClipboardError(self.fail_reads)
        if self.text is None:
            raise NoTextError(NO_TEXT_MESSAGE)
        return self.text

    def write_text(self, text: str) -> None:
        if self.fail_writes:
            raise ClipboardError(self.fail_writes)
        self.text = text


class ScriptedInjector(KeystrokeInjector):
    """Injector that returns canned helper results or raises canned errors."""

    name = "scripted"

    def __init__(self, returncode=0, stderr="", error=None):
        self.returncode = returncode
        self.stderr = stderr
        self.error = error
        self.calls = []

    def _result(self, action):
        self.calls.append(action)
        if self.error is not None:
            raise self.error
        return HelperResult(
            argv=("helper", action),
            returncode=self.returncode,
            stdout="",
            stderr=self.stderr,
        )

    def send_copy_chord(self) -> HelperResult:
        return self._result("copy")

    def broadcast_escape(self) -> HelperResult:
        return self._result("escape")


@pytest.fixture
def memory_clipboard():
    return MemoryClipboard()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Strip SELECTION_BRIDGE_* variables and run from an empty directory."""
    import os

    for key in list(os.environ):
        if key.startswith("SELECTION_BRIDGE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
