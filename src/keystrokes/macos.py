"""
AppleScript keystroke helpers run through ``osascript``.

The scripts are fixed text with an ``on run argv`` handler. Everything
that varies (delays, key codes) travels as separate ``argv`` entries, so
no value is ever spliced into AppleScript source. Delays go over as whole
milliseconds because AppleScript's text-to-real coercion follows the user's
locale decimal separator.
"""

import logging
from typing import Optional

from keystrokes.base import KeystrokeInjector
from keystrokes.process import HelperResult, run_helper

logger = logging.getLogger(__name__)

ESCAPE_KEY_CODE = 53

COPY_SCRIPT = """
on run argv
    set settleDelay to ((item 1 of argv) as integer) / 1000
    set copyDelay to ((item 2 of argv) as integer) / 1000
    tell application "System Events"
        delay settleDelay
        keystroke "c" using {command down}
        delay copyDelay
    end tell
    return "success"
end run
"""

ESCAPE_SCRIPT = """
on run argv
    set escapeKey to (item 1 of argv) as integer
    tell application "System Events"
        set visibleApps to every application process whose visible is true
        repeat with appProcess in visibleApps
            try
                tell appProcess
                    if (count of windows) > 0 then
                        key code escapeKey
                    end if
                end tell
            on error
                -- some applications refuse synthetic keystrokes
            end try
        end repeat
    end tell
end run
"""


def _millis(seconds: float) -> str:
    return str(int(round(seconds * 1000)))


class MacOSKeystrokes(KeystrokeInjector):

    name = "macos"

    def __init__(
        self,
        osascript: str = "osascript",
        settle_delay: float = 0.01,
        copy_delay: float = 0.02,
        timeout: Optional[float] = None,
    ) -> None:
        self.osascript = osascript
        self.settle_delay = settle_delay
        self.copy_delay = copy_delay
        self.timeout = timeout

    def send_copy_chord(self) -> HelperResult:
        logger.info("Sending Cmd+C via AppleScript")
        return run_helper(
            [
                self.osascript,
                "-e", COPY_SCRIPT,
                _millis(self.settle_delay),
                _millis(self.copy_delay),
            ],
            timeout=self.timeout,
        )

    def broadcast_escape(self) -> HelperResult:
        logger.info("Sending Escape to visible applications via AppleScript")
        return run_helper(
            [self.osascript, "-e", ESCAPE_SCRIPT, str(ESCAPE_KEY_CODE)],
            timeout=self.timeout,
        )
