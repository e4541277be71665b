"""Typed, priority-ordered events."""

from .core.events import (
    ArgsError,
    EventArgs,
    EventError,
    EventHandler,
    EventPriority,
    PrioritizedEvent,
    PrioritizedEventHandler,
    StreamSink,
    Value,
    Values,
)

__version__ = "0.1.0"

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
