"""Core event models."""

from datetime import UTC, datetime
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")


class EventPriority(int, Enum):
    """Predefined integer event priorities."""

    LOWEST = -1000
    LOW = -500
    NORMAL = 0
    HIGH = 500
    HIGHEST = 1000


class EventArgs(BaseModel):
    """Base payload passed to every event handler.

    ``event_name`` and ``when_occurred`` are overwritten by the broadcasting
    event. Subclass to carry custom data.
    """

    event_name: str = Field(default="")
    when_occurred: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = ConfigDict(arbitrary_types_allowed=True)


class Value(EventArgs, Generic[T]):
    """Payload carrying a single value."""

    value: T


class Values(EventArgs, Generic[T1, T2]):
    """Payload carrying two values."""

    value1: T1
    value2: T2
