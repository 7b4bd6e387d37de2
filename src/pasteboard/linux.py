import logging
import os
import shutil
import subprocess
from typing import List, Optional

from pasteboard.base import NO_TEXT_MESSAGE, ClipboardBackend, ClipboardError, NoTextError

logger = logging.getLogger(__name__)

_EMPTY_MARKERS = ("nothing is copied", "no selection", "not available")


class LinuxClipboard(ClipboardBackend):
    """Clipboard text through wl-clipboard on Wayland, xclip or xsel on X11."""

    name = "linux"

    _TEXT_TARGETS = {
        "text/plain",
        "text/plain;charset=utf-8",
        "text/plain;charset=utf8",
        "utf8_string",
        "string",
        "text",
    }

    def __init__(self, timeout: float = 2.0) -> None:
        self.timeout = timeout

    def read_text(self) -> str:
        tool = self._detect_tool()

        if tool == "wl-clipboard":
            types = self._parse_type_list(
                self._run_command(["wl-paste", "--list-types"]))
            if not self._has_text_target(types):
                raise NoTextError(NO_TEXT_MESSAGE)
            data = self._run_command(["wl-paste", "--no-newline"])
        elif tool == "xclip":
            types = self._parse_type_list(
                self._run_command(
                    ["xclip", "-selection", "clipboard", "-t", "TARGETS", "-o"])
            )
            if not self._has_text_target(types):
                raise NoTextError(NO_TEXT_MESSAGE)
            data = self._run_command(["xclip", "-selection", "clipboard", "-o"])
        else:
            # xsel has no target listing; it prints nothing for non-text owners
            data = self._run_command(["xsel", "--clipboard", "--output"])

        return data.decode("utf-8", errors="replace")

    def write_text(self, text: str) -> None:
        tool = self._detect_tool()

        if tool == "wl-clipboard":
            command = ["wl-copy"]
        elif tool == "xclip":
            command = ["xclip", "-selection", "clipboard"]
        else:
            command = ["xsel", "--clipboard", "--input"]

        try:
            subprocess.run(
                command,
                input=text.encode("utf-8"),
                # the tool forks a selection owner that must not hold our stdio
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(
                f"{command[0]} exited with status {exc.returncode}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ClipboardError(
                f"{command[0]} timed out after {self.timeout}s") from exc
        except OSError as exc:
            raise ClipboardError(f"Could not run {command[0]}: {exc}") from exc

    def _detect_tool(self) -> str:
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy") and shutil.which("wl-paste"):
            return "wl-clipboard"
        if shutil.which("xclip"):
            return "xclip"
        if shutil.which("xsel"):
            return "xsel"
        raise ClipboardError(
            "No clipboard tool found. Install wl-clipboard, xclip or xsel.")

    def _has_text_target(self, types: List[str]) -> bool:
        return any(target.lower() in self._TEXT_TARGETS for target in types)

    def _parse_type_list(self, data: Optional[bytes]) -> List[str]:
        if not data:
            return []
        text = data.decode("utf-8", errors="ignore")
        return [line.strip() for line in text.splitlines() if line.strip()]

    def _run_command(self, command: List[str]) -> bytes:
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or b"").decode("utf-8", errors="ignore").strip()
            logger.debug("%s failed: %s", command[0], stderr)
            # wl-paste and xclip exit non-zero when nothing owns the clipboard
            if any(marker in stderr.lower() for marker in _EMPTY_MARKERS):
                raise NoTextError(NO_TEXT_MESSAGE) from exc
            raise ClipboardError(
                f"{command[0]} exited with status {exc.returncode}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ClipboardError(
                f"{command[0]} timed out after {self.timeout}s") from exc
        except OSError as exc:
            raise ClipboardError(f"Could not run {command[0]}: {exc}") from exc
        return result.stdout
