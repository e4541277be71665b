"""Common test fixtures and configuration."""

import logging
import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from prioritized_event import PrioritizedEvent

from .events_common import ScoreArgs

os.environ["LOG_LEVEL"] = "DEBUG"


@pytest.fixture(autouse=True)
def load_test_env():
    """Load test environment variables before each test"""
    root_dir = Path(__file__).parent.parent
    test_env_path = root_dir / ".env.test"
    if test_env_path.exists():
        load_dotenv(test_env_path)
    yield


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def event():
    return PrioritizedEvent("test")


@pytest.fixture
def score_event():
    return PrioritizedEvent("score", ScoreArgs)
