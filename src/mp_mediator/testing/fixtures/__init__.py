"""Testing fixtures – pytest fixtures for the dispatch pipeline."""
from mp_mediator.testing.fixtures.mediator import (
    dispatch_log_sink,
    mediator_settings,
    recording_handler,
)

__all__ = ["dispatch_log_sink", "mediator_settings", "recording_handler"]
