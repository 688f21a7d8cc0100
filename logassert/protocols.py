"""Protocol definitions for loggers that log capture can work with."""

from typing import Any, Protocol, TextIO, runtime_checkable


@runtime_checkable
class SinkLogger(Protocol):
    """Protocol for a logger whose formatted output goes to a replaceable sink.

    This is the whole surface log capture relies on: reading the current
    sink and assigning a new one.
    """

    sink: TextIO


class LogFormatter(Protocol):
    """Protocol for turning a log call into the text written to the sink."""

    def __call__(self, level_name: str, timestamp: Any, name: str, message: Any) -> str:
        """Format one log entry."""
        ...
