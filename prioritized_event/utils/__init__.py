"""Logging and configuration helpers."""

from .config import LoggingSettings
from .logging_config import JSONFormatter, generate_request_id, get_logger, setup_logging

__all__ = [
    "LoggingSettings",
    "JSONFormatter",
    "generate_request_id",
    "get_logger",
    "setup_logging",
]
