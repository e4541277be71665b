"""Core event types."""

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from .models import EventArgs

T = TypeVar("T", bound=EventArgs)

# A subscriber callback receiving the broadcast payload
EventHandler = Callable[[T], Any]


@runtime_checkable
class StreamSink(Protocol):
    """Push target for bridged broadcasts, e.g. ``asyncio.Queue``."""

    @abstractmethod
    def put_nowait(self, item: Any) -> None:
        """Accept one value."""
        ...
