"""Environment-driven settings."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    log_file: Path | None = Field(default=None)

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, value: str | None) -> str:
        """Normalize and check the log level name."""
        if value is None:
            return "INFO"
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def validate_log_file(cls, value: str | Path | None) -> Path | None:
        if value is None or str(value).strip() == "":
            return None
        return Path(value)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "LoggingSettings":
        """Build settings from the environment.

        Values from ``env_file`` (or a ``.env`` found from the working
        directory) are loaded first without overriding variables that are
        already set.
        """
        load_dotenv(env_file)
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE"),
        )
