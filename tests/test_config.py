"""Tests for environment-driven settings."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from prioritized_event.utils.config import LoggingSettings


def test_defaults():
    settings = LoggingSettings()
    assert settings.level == "INFO"
    assert settings.log_file is None


def test_level_is_normalized():
    assert LoggingSettings(level=" debug ").level == "DEBUG"


def test_unknown_level_rejected():
    with pytest.raises(ValidationError, match="Unknown log level"):
        LoggingSettings(level="chatty")


def test_empty_log_file_means_none():
    assert LoggingSettings(log_file="").log_file is None
    assert LoggingSettings(log_file="logs/app.log").log_file == Path("logs/app.log")


def test_from_env():
    with patch.dict("os.environ", {"LOG_LEVEL": "warning", "LOG_FILE": "out/events.log"}):
        settings = LoggingSettings.from_env()

    assert settings.level == "WARNING"
    assert settings.log_file == Path("out/events.log")


def test_from_env_file(tmp_path, monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FILE"):
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=ERROR\nLOG_FILE=\n")

    settings = LoggingSettings.from_env(env_file)
    assert settings.level == "ERROR"
    assert settings.log_file is None


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=ERROR\n")

    assert LoggingSettings.from_env(env_file).level == "CRITICAL"
