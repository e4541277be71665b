"""Prioritized event handler."""

from typing import Any, Generic, TypeVar

from .models import EventArgs
from .types import EventHandler

T = TypeVar("T", bound=EventArgs)


class PrioritizedEventHandler(Generic[T]):
    """An event handler callback paired with a priority.

    Two handlers are equal when their callbacks are equal, whatever their
    priorities. This lets a caller unsubscribe with a freshly built handler
    around the same callback.
    """

    __slots__ = ("_handler", "_priority")

    def __init__(self, handler: EventHandler[T], priority: int = 0) -> None:
        """Initialize the handler.

        Args:
            handler: Callback invoked with the broadcast payload
            priority: Higher values are dispatched first

        Raises:
            TypeError: If handler is not callable or priority is not an int
        """
        if not callable(handler):
            raise TypeError(
                f"Event handler must be callable, got {type(handler).__name__}"
            )
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise TypeError(
                f"Event handler priority must be an int, got {type(priority).__name__}"
            )
        object.__setattr__(self, "_handler", handler)
        object.__setattr__(self, "_priority", priority)

    @property
    def handler(self) -> EventHandler[T]:
        return self._handler

    @property
    def priority(self) -> int:
        return self._priority

    def __call__(self, args: T) -> Any:
        return self._handler(args)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PrioritizedEventHandler):
            return NotImplemented
        return self._handler == other._handler

    def __hash__(self) -> int:
        return hash(self._handler)

    def __repr__(self) -> str:
        return f"{self._handler!r} (priority: {int(self._priority)})"
