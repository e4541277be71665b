"""Event errors."""


class EventError(Exception):
    """Base class for event errors."""


class ArgsError(EventError):
    """Raised when a broadcast payload does not match the event's payload type."""

    def __init__(self, expected_type: type) -> None:
        self.expected_type = expected_type
        super().__init__(
            f"Incorrect args being broadcast - args should be a {expected_type.__name__}"
        )
