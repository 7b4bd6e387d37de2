import os
import platform

import pytest

from services import BridgeConfig


def test_defaults(clean_env):
    config = BridgeConfig.from_env()

    assert config.platform == platform.system()
    assert config.log_level == "INFO"
    assert (config.host, config.port) == ("127.0.0.1", 3030)
    assert (config.settle_delay, config.copy_delay) == (0.01, 0.02)
    assert config.helper_timeout is None
    assert config.clipboard_timeout == 2.0
    assert (config.osascript, config.powershell) == ("osascript", "powershell")


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("SELECTION_BRIDGE_PLATFORM", "Plan9")
    monkeypatch.setenv("SELECTION_BRIDGE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SELECTION_BRIDGE_PORT", "4040")
    monkeypatch.setenv("SELECTION_BRIDGE_HELPER_TIMEOUT", "3.5")
    monkeypatch.setenv("SELECTION_BRIDGE_POWERSHELL", "pwsh")

    config = BridgeConfig.from_env()

    assert config.platform == "Plan9"
    assert config.log_level == "DEBUG"
    assert config.port == 4040
    assert config.helper_timeout == 3.5
    assert config.powershell == "pwsh"


def test_env_file_does_not_override_environment(clean_env, monkeypatch):
    env_file = clean_env / ".env"
    env_file.write_text(
        "SELECTION_BRIDGE_OSASCRIPT=/opt/bin/osascript\n"
        "SELECTION_BRIDGE_PORT=5050\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("SELECTION_BRIDGE_PORT", "6060")

    try:
        config = BridgeConfig.from_env(env_path=env_file)
    finally:
        os.environ.pop("SELECTION_BRIDGE_OSASCRIPT", None)

    assert config.osascript == "/opt/bin/osascript"
    assert config.port == 6060


@pytest.mark.parametrize(
    "name, value, message",
    [
        ("SELECTION_BRIDGE_PORT", "http", "must be an integer"),
        ("SELECTION_BRIDGE_COPY_DELAY", "soon", "must be a number"),
        ("SELECTION_BRIDGE_SETTLE_DELAY", "-1", "must not be negative"),
        ("SELECTION_BRIDGE_LOG_LEVEL", "loud", "LOG_LEVEL must be one of"),
    ],
)
def test_invalid_values_raise(clean_env, monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=message):
        BridgeConfig.from_env()


@pytest.mark.parametrize(
    "raw, expected",
    [("warn", "WARNING"), ("Warning", "WARNING"), ("fatal", "CRITICAL"), ("debug", "DEBUG")],
)
def test_log_level_is_normalized(clean_env, monkeypatch, raw, expected):
    monkeypatch.setenv("SELECTION_BRIDGE_LOG_LEVEL", raw)

    assert BridgeConfig.from_env().log_level == expected
