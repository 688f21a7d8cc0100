"""Leveled logger writing formatted text to a replaceable sink.

``Logger`` is the collaborator that log capture borrows: it formats each
call and writes the result to ``sink``, which can be swapped at any time.
It also works as the output end of a structlog pipeline, see ``structured``.
"""

import logging
import sys
import traceback
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, TextIO, Union

import structlog

from .core.config import get_global_settings
from .protocols import LogFormatter

Level = Union[int, str]

_LEVEL_ALIASES = {"WARN": logging.WARNING, "FATAL": logging.CRITICAL}


def to_level(level: Level) -> int:
    """Convert a level name or number to a stdlib numeric level.

    :raises ValueError: If ``level`` is not a known level name
    """
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[name]

    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


class SimpleFormatter:
    """Render only the message followed by a newline."""

    def __call__(self, level_name: str, timestamp: Any, name: str, message: Any) -> str:
        text = message if isinstance(message, str) else repr(message)
        return f"{text}\n"


class Logger:
    """Logger writing formatted entries to ``sink``.

    :param sink: Text stream receiving formatted output
    :param level: Minimum level written; defaults to
        ``Settings.default_logger_level``
    :param name: Name passed to the formatter
    :param formatter: Callable building the text for each entry; defaults to
        ``SimpleFormatter``
    """

    def __init__(
        self,
        sink: TextIO,
        level: Optional[Level] = None,
        name: Optional[str] = None,
        formatter: Optional[LogFormatter] = None,
    ):
        if level is None:
            level = get_global_settings().default_logger_level

        self.sink = sink
        self.level = level
        self.name = name or ""
        self.formatter = formatter or SimpleFormatter()

    def __repr__(self) -> str:
        return f"<Logger {self.name!r} ({logging.getLevelName(self.level)})>"

    @property
    def level(self) -> int:
        """Minimum numeric level written to the sink."""
        return self._level

    @level.setter
    def level(self, value: Level) -> None:
        self._level = to_level(value)

    def is_enabled_for(self, level: Level) -> bool:
        """Check whether a message at ``level`` would be written."""
        return to_level(level) >= self._level

    def log(self, level: Level, message: Any) -> None:
        """Write ``message`` at ``level`` if the logger is enabled for it."""
        level = to_level(level)
        if level < self._level:
            return
        self._write(logging.getLevelName(level), message)

    def debug(self, message: Any) -> None:
        self.log(logging.DEBUG, message)

    def info(self, message: Any) -> None:
        self.log(logging.INFO, message)

    def warning(self, message: Any) -> None:
        self.log(logging.WARNING, message)

    def error(self, message: Any) -> None:
        self.log(logging.ERROR, message)

    def critical(self, message: Any) -> None:
        self.log(logging.CRITICAL, message)

    def exception(self, message: Any) -> None:
        """Log at ERROR, followed by the traceback of the exception being handled."""
        if sys.exc_info()[0] is not None:
            text = message if isinstance(message, str) else repr(message)
            message = f"{text}\n{traceback.format_exc().rstrip()}"
        self.log(logging.ERROR, message)

    warn = warning
    fatal = critical

    def msg(self, message: Any) -> None:
        """Write ``message`` regardless of level."""
        self._write("ANY", message)

    def _write(self, level_name: str, message: Any) -> None:
        self.sink.write(self.formatter(level_name, datetime.now(), self.name, message))
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()

    @contextmanager
    def silence(self, level: Level = logging.ERROR) -> Iterator["Logger"]:
        """Raise the level for the duration of the block.

        The previous level is restored however the block exits.
        """
        previous = self._level
        self.level = level
        try:
            yield self
        finally:
            self._level = previous

    def outputs_to(self, *sources: Any) -> bool:
        """Check whether this logger writes to any of ``sources``.

        A source matches when it is the sink itself, or a path equal to the
        sink's ``name`` (set on file objects).
        """
        sink_name = getattr(self.sink, "name", None)
        for source in sources:
            if source is self.sink:
                return True
            if isinstance(source, str) and sink_name is not None and source == str(sink_name):
                return True
        return False


def render_event(_: Any, _method_name: str, event_dict: Dict[str, Any]) -> str:
    """Render a structlog event as its message plus sorted ``key=value`` pairs."""
    event = event_dict.pop("event", "")
    text = event if isinstance(event, str) else repr(event)
    pairs = " ".join(f"{key}={event_dict[key]!r}" for key in sorted(event_dict))
    return f"{text} {pairs}" if pairs else text


def structured(
    logger: Logger,
    processors: Optional[List[Any]] = None,
    **context: Any,
) -> Any:
    """Wrap ``logger`` as a structlog bound logger.

    :param logger: Logger receiving the rendered events
    :param processors: structlog processor chain ending in a renderer that
        returns a string; defaults to ``render_event``
    :param context: Initial key/value pairs bound to the logger
    :returns: structlog bound logger whose output ends up in ``logger.sink``
    """
    if processors is None:
        processors = [structlog.contextvars.merge_contextvars, render_event]

    return structlog.wrap_logger(
        logger,
        processors=processors,
        wrapper_class=structlog.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=False,
    ).bind(**context)
