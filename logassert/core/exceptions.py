"""
logassert exceptions.

Configuration and usage errors derive from ``LogAssertError``. Assertion
failures derive from ``AssertionError`` instead so that pytest and unittest
report them as test failures rather than errors.
"""

from typing import Any, Dict, Optional


class LogAssertError(Exception):
    """Base exception for logassert usage errors."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({details})"
        return self.message


class UnsupportedLoggerError(LogAssertError, TypeError):
    """Raised when an object offers no sink that can be captured."""

    def __init__(self, logger: Any, reason: str = "no replaceable output sink"):
        super().__init__(
            message=f"Cannot capture logs from {type(logger).__name__}: {reason}",
            context={"logger": logger},
        )
        self.logger = logger


class UnsupportedExpectationError(LogAssertError, TypeError):
    """Raised when an expectation is neither a string nor a compiled pattern."""

    def __init__(self, expected: Any):
        super().__init__(
            message="Expected value must be a str or a compiled re.Pattern",
            context={"type": type(expected).__name__},
        )
        self.expected = expected


class LoggedAssertionError(AssertionError):
    """Captured log output did not satisfy an assertion.

    :param message: Diagnostic shown by the test runner
    :param expected: The literal or pattern that was checked, or None
    :param actual: The full captured text
    :param negated: True when raised by a "not logged" assertion
    """

    def __init__(
        self,
        message: str,
        expected: Any,
        actual: str,
        negated: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual
        self.negated = negated
