"""Shared fixtures for logassert tests."""

import io
import logging
import uuid

import pytest

from logassert.core import config as config_module
from logassert.logger import Logger


@pytest.fixture(autouse=True)
def reset_global_settings(monkeypatch):
    """Make every test build settings from its own environment."""
    monkeypatch.setattr(config_module, "settings", None)


@pytest.fixture
def logger():
    """Logger writing to a StringIO, like ``Logger(StringIO())`` in user code."""
    return Logger(io.StringIO())


@pytest.fixture
def stdlib_logger():
    """Isolated stdlib logger with one message-only StreamHandler."""
    stdlib = logging.getLogger(f"logassert.tests.{uuid.uuid4().hex}")
    stdlib.setLevel(logging.DEBUG)
    stdlib.propagate = False

    handler = logging.StreamHandler(io.StringIO())
    handler.setFormatter(logging.Formatter("%(message)s"))
    stdlib.addHandler(handler)

    yield stdlib

    stdlib.removeHandler(handler)
