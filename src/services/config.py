from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "SELECTION_BRIDGE_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _env(name: str) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _log_level(default: str) -> str:
    raw = _env("LOG_LEVEL")
    if raw is None:
        return default
    level = raw.upper()
    level = _LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        raise ValueError(
            f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


def _to_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{ENV_PREFIX}{name} must not be negative, got {raw!r}")
    return value


@dataclass(frozen=True)
class BridgeConfig:
    platform: str = ""
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3030
    settle_delay: float = 0.01
    copy_delay: float = 0.02
    helper_timeout: Optional[float] = None
    clipboard_timeout: float = 2.0
    osascript: str = "osascript"
    powershell: str = "powershell"

    def __post_init__(self) -> None:
        if not self.platform:
            object.__setattr__(self, "platform", platform.system())

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "BridgeConfig":
        """Build the config from ``SELECTION_BRIDGE_*`` variables.

        A ``.env`` file (``env_path``, else the nearest one above the working
        directory) is loaded first without overriding variables that
        are already set. Malformed numbers raise ``ValueError``.
        """
        load_dotenv(dotenv_path=env_path or find_dotenv(usecwd=True), override=False)

        port_raw = _env("PORT")
        if port_raw is None:
            port = cls.port
        else:
            try:
                port = int(port_raw)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port_raw!r}") from None

        return cls(
            platform=_env("PLATFORM") or "",
            log_level=_log_level(cls.log_level),
            host=_env("HOST") or cls.host,
            port=port,
            settle_delay=_to_float("SETTLE_DELAY", cls.settle_delay),
            copy_delay=_to_float("COPY_DELAY", cls.copy_delay),
            helper_timeout=_to_float("HELPER_TIMEOUT", None),
            clipboard_timeout=_to_float("CLIPBOARD_TIMEOUT", cls.clipboard_timeout),
            osascript=_env("OSASCRIPT") or cls.osascript,
            powershell=_env("POWERSHELL") or cls.powershell,
        )
