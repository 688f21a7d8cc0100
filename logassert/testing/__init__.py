"""Log capture and log assertions for tests."""

from .capture import (
    CapturedOutput,
    StreamHandlerSink,
    capture_logs,
    capturing_logs,
    resolve_sink_target,
)
from .assertions import (
    LoggingAssertions,
    assert_logged,
    assert_not_logged,
    check_logged,
    check_not_logged,
    logged,
    not_logged,
)

__all__ = [
    # Capture
    "CapturedOutput",
    "StreamHandlerSink",
    "capture_logs",
    "capturing_logs",
    "resolve_sink_target",
    # Assertions
    "LoggingAssertions",
    "assert_logged",
    "assert_not_logged",
    "check_logged",
    "check_not_logged",
    "logged",
    "not_logged",
]
