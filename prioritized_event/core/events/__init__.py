"""Core event system interfaces and implementations."""

from .errors import ArgsError, EventError
from .event import PrioritizedEvent
from .handler import PrioritizedEventHandler
from .models import EventArgs, EventPriority, Value, Values
from .types import EventHandler, StreamSink

__all__ = [
    "ArgsError",
    "EventArgs",
    "EventError",
    "EventHandler",
    "EventPriority",
    "PrioritizedEvent",
    "PrioritizedEventHandler",
    "StreamSink",
    "Value",
    "Values",
]
