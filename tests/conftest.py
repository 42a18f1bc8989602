"""Shared test configuration."""

from __future__ import annotations

import logging

import pytest
import structlog

from mp_mediator.testing.fixtures import (  # noqa: F401
    dispatch_log_sink,
    mediator_settings,
    recording_handler,
)


@pytest.fixture
def restore_logging():
    """Undo the global structlog / root-logger setup made by JsonLoggerFactory."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
