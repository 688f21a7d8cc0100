"""Logging configuration using structlog.

logassert reports its own diagnostics through structlog on top of the stdlib
``logassert`` logger. Nothing here touches the root logger or the global
structlog configuration, since the package runs inside other projects' test
sessions.
"""

import logging
from typing import Any, Optional

import structlog

from .config import get_global_settings

LIBRARY_LOGGER_NAME = "logassert"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer(),
]


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Set the level of logassert's own diagnostics.

    :param log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
        defaults to ``Settings.log_level``
    """
    if log_level is None:
        log_level = get_global_settings().log_level

    logging.getLogger(LIBRARY_LOGGER_NAME).setLevel(
        getattr(logging, log_level.upper(), logging.WARNING)
    )


def get_logger(name: str) -> Any:
    """
    Get a structlog logger writing to the stdlib logger ``name``.

    :param name: Logger name (usually __name__)
    :returns: Bound logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )
