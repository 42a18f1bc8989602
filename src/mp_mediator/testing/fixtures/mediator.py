"""Testing fixtures – dispatch_log_sink, recording_handler, mediator_settings."""
from __future__ import annotations

import pytest

from mp_mediator.config.settings import MediatorSettings
from mp_mediator.testing.fakes import InMemoryDispatchLogSink, RecordingHandler


@pytest.fixture
def dispatch_log_sink() -> InMemoryDispatchLogSink:
    return InMemoryDispatchLogSink()


@pytest.fixture
def recording_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def mediator_settings() -> MediatorSettings:
    return MediatorSettings(json_logs=False)


__all__ = ["dispatch_log_sink", "mediator_settings", "recording_handler"]
