"""Testing fakes – in-memory doubles for the dispatch pipeline."""
from mp_mediator.testing.fakes.behaviors import ShortCircuitBehavior, TraceBehavior
from mp_mediator.testing.fakes.handlers import RecordingHandler
from mp_mediator.testing.fakes.log_sink import DispatchLogRecord, InMemoryDispatchLogSink

__all__ = [
    "DispatchLogRecord",
    "InMemoryDispatchLogSink",
    "RecordingHandler",
    "ShortCircuitBehavior",
    "TraceBehavior",
]
