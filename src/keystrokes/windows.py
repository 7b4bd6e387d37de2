"""
SendKeys helpers run through PowerShell.

The script text never changes; the key sequence and the delays reach it as
environment variables of the child process.
"""

import logging
from typing import Optional

from keystrokes.base import KeystrokeInjector
from keystrokes.process import HelperResult, run_helper

logger = logging.getLogger(__name__)

KEYS_VARIABLE = "SELECTION_BRIDGE_SENDKEYS"
SETTLE_VARIABLE = "SELECTION_BRIDGE_SETTLE_MS"
AFTER_VARIABLE = "SELECTION_BRIDGE_AFTER_MS"

COPY_CHORD = "^c"
ESCAPE_KEY = "{ESC}"

SENDKEYS_SCRIPT = (
    "Add-Type -AssemblyName System.Windows.Forms; "
    "Start-Sleep -Milliseconds ([int]$env:SELECTION_BRIDGE_SETTLE_MS); "
    "[System.Windows.Forms.SendKeys]::SendWait($env:SELECTION_BRIDGE_SENDKEYS); "
    "Start-Sleep -Milliseconds ([int]$env:SELECTION_BRIDGE_AFTER_MS)"
)


class WindowsKeystrokes(KeystrokeInjector):

    name = "windows"

    def __init__(
        self,
        powershell: str = "powershell",
        settle_delay: float = 0.01,
        copy_delay: float = 0.02,
        timeout: Optional[float] = None,
    ) -> None:
        self.powershell = powershell
        self.settle_delay = settle_delay
        self.copy_delay = copy_delay
        self.timeout = timeout

    def send_copy_chord(self) -> HelperResult:
        logger.info("Sending Ctrl+C via PowerShell SendKeys")
        return self._send_keys(COPY_CHORD, self.settle_delay, self.copy_delay)

    def broadcast_escape(self) -> HelperResult:
        logger.info("Sending Escape via PowerShell SendKeys")
        return self._send_keys(ESCAPE_KEY, 0.0, 0.0)

    def _send_keys(self, keys: str, settle: float, after: float) -> HelperResult:
        env = {
            KEYS_VARIABLE: keys,
            SETTLE_VARIABLE: str(int(round(settle * 1000))),
            AFTER_VARIABLE: str(int(round(after * 1000))),
        }
        return run_helper(
            [
                self.powershell,
                "-NoProfile",
                "-NonInteractive",
                "-Command", SENDKEYS_SCRIPT,
            ],
            env=env,
            timeout=self.timeout,
        )
