"""
logassert package.

Capture what a logger writes while a block runs and assert on it.
"""

from .core import (
    LogAssertError,
    LoggedAssertionError,
    UnsupportedExpectationError,
    UnsupportedLoggerError,
    get_global_settings,
)
from .logger import Logger, SimpleFormatter, structured
from .testing import (
    CapturedOutput,
    LoggingAssertions,
    assert_logged,
    assert_not_logged,
    capture_logs,
    capturing_logs,
    logged,
    not_logged,
)

__version__ = "1.0.0"

__all__ = [
    "get_global_settings",
    "LogAssertError",
    "LoggedAssertionError",
    "UnsupportedExpectationError",
    "UnsupportedLoggerError",
    "Logger",
    "SimpleFormatter",
    "structured",
    "CapturedOutput",
    "LoggingAssertions",
    "assert_logged",
    "assert_not_logged",
    "capture_logs",
    "capturing_logs",
    "logged",
    "not_logged",
]
