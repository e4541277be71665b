"""Prioritized event implementation."""

from datetime import UTC, datetime
from typing import Generic, TypeVar

from prioritized_event.utils.logging_config import generate_request_id, get_logger

from .errors import ArgsError
from .handler import PrioritizedEventHandler
from .models import EventArgs
from .types import EventHandler, StreamSink

logger = get_logger(__name__)

T = TypeVar("T", bound=EventArgs)


class PrioritizedEvent(Generic[T]):
    """An event whose subscribers are notified in priority order.

    Handlers with a higher priority run first. Among handlers sharing a
    priority, the most recently subscribed one runs first. Handlers stay
    subscribed across broadcasts until removed.

    Example:
        >>> e = PrioritizedEvent("changed")
        >>> e.subscribe(PrioritizedEventHandler(lambda args: print("changed"), 1))
        >>> e.broadcast()
        changed
        True

    Subscribing or unsubscribing from inside a handler affects the broadcast
    in progress in an unspecified way. Calls from several threads on the
    same instance must be serialized by the caller.
    """

    def __init__(self, event_name: str = "", args_type: type[T] = EventArgs) -> None:
        """Initialize the event.

        Args:
            event_name: Optional name identifying the event
            args_type: Payload type every broadcast must be an instance of
        """
        self._event_name = event_name
        self._args_type = args_type
        self._handlers: list[PrioritizedEventHandler[T]] = []
        self._req_id = generate_request_id()

    @property
    def event_name(self) -> str:
        return self._event_name

    @property
    def generic_type(self) -> type[T]:
        """Payload type this event broadcasts, ``EventArgs`` unless specified."""
        return self._args_type

    @property
    def subscriber_count(self) -> int:
        """Number of subscribed handlers."""
        return len(self._handlers)

    @property
    def handlers(self) -> tuple[PrioritizedEventHandler[T], ...]:
        """Subscribed handlers in dispatch order."""
        return tuple(self._handlers)

    @staticmethod
    def _compare(a: PrioritizedEventHandler[T], b: PrioritizedEventHandler[T]) -> int:
        # Negative when a dispatches before b
        return b.priority - a.priority

    def _insertion_index(self, handler: PrioritizedEventHandler[T]) -> int:
        """Binary search for the slot keeping handlers in descending priority.

        The slot precedes every handler of equal priority, so the newest
        handler wins ties.
        """
        low = 0
        high = len(self._handlers)
        while low < high:
            mid = (low + high) // 2
            if self._compare(self._handlers[mid], handler) < 0:
                low = mid + 1
            else:
                high = mid
        return low

    def _add_handler(self, handler: PrioritizedEventHandler[T]) -> None:
        self._handlers.insert(self._insertion_index(handler), handler)

    def subscribe(self, handler: PrioritizedEventHandler[T]) -> None:
        """Add a handler called whenever this event is broadcast.

        Args:
            handler: Callback and priority to subscribe

        Raises:
            TypeError: If handler is not a PrioritizedEventHandler
        """
        if not isinstance(handler, PrioritizedEventHandler):
            raise TypeError(
                f"Expected a PrioritizedEventHandler, got {type(handler).__name__}"
            )
        self._add_handler(handler)
        logger.debug(
            "Subscribed to event",
            extra={
                "req_id": self._req_id,
                "component": "prioritized_event",
                "event_name": self._event_name,
                "priority": handler.priority,
                "subscriber_count": len(self._handlers),
            },
        )

    def subscribe_stream(self, priority: int, sink: StreamSink) -> None:
        """Forward every broadcast payload to ``sink.put_nowait``.

        The sink is never closed or drained by the event; that remains the
        caller's job.

        Raises:
            TypeError: If sink has no put_nowait method
        """
        if not isinstance(sink, StreamSink):
            raise TypeError(
                f"Stream sink must provide put_nowait, got {type(sink).__name__}"
            )
        self._add_handler(PrioritizedEventHandler(sink.put_nowait, priority))

    def unsubscribe(
        self, handler: EventHandler[T] | PrioritizedEventHandler[T]
    ) -> bool:
        """Remove a previously subscribed handler.

        Handlers are matched on their callback only, so the priority of a
        PrioritizedEventHandler passed here is ignored. Anonymous callbacks
        that were not kept by the caller can only be removed with
        ``unsubscribe_all``.

        Returns:
            bool: True if a handler was removed, False if none matched
        """
        if not isinstance(handler, PrioritizedEventHandler):
            if not callable(handler):
                return False
            handler = PrioritizedEventHandler(handler)
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        return True

    def unsubscribe_all(self) -> None:
        """Remove all handlers."""
        self._handlers.clear()

    def broadcast(self, args: T | None = None) -> bool:
        """Call every handler in priority order with ``args``.

        A base EventArgs is created when no args are given. The payload is
        stamped with this event's name and the current UTC time before any
        handler runs, including a payload supplied by the caller. Exceptions
        raised by a handler propagate and skip the remaining handlers.

        Args:
            args: Payload, an instance of this event's payload type

        Returns:
            bool: False if there were no handlers, True otherwise

        Raises:
            ArgsError: If args is not an instance of the payload type
        """
        if not self._handlers:
            return False

        if args is None:
            args = EventArgs()
        if not isinstance(args, self._args_type):
            raise ArgsError(self._args_type)

        args.event_name = self._event_name
        args.when_occurred = datetime.now(UTC)

        logger.debug(
            "Broadcasting event",
            extra={
                "req_id": self._req_id,
                "component": "prioritized_event",
                "event_name": self._event_name,
                "args_type": type(args).__name__,
                "subscriber_count": len(self._handlers),
            },
        )

        for handler in self._handlers:
            handler(args)

        return True

    def notify_subscribers(self, args: T | None = None) -> bool:
        """Alias for ``broadcast``."""
        return self.broadcast(args)

    def __str__(self) -> str:
        runtime_type = f"{type(self).__name__}[{self._args_type.__name__}]"
        if not self._event_name:
            return f"Unnamed:{runtime_type}"
        return f"{self._event_name}:{runtime_type}"
