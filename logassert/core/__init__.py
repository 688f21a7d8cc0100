"""Core infrastructure module.

Settings, diagnostics logging, and the exception hierarchy shared by the
rest of the package.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import (
    LogAssertError,
    UnsupportedLoggerError,
    UnsupportedExpectationError,
    LoggedAssertionError,
)
from .logging import setup_logging, get_logger

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "LogAssertError",
    "UnsupportedLoggerError",
    "UnsupportedExpectationError",
    "LoggedAssertionError",
    # Logging
    "setup_logging",
    "get_logger",
]
