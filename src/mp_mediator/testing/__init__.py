"""Testing support – fakes and fixtures.

Re-export the fixtures from your ``conftest.py``::

    from mp_mediator.testing.fixtures import dispatch_log_sink  # noqa: F401
"""

from mp_mediator.testing.fakes import (
    DispatchLogRecord,
    InMemoryDispatchLogSink,
    RecordingHandler,
    ShortCircuitBehavior,
    TraceBehavior,
)

__all__ = [
    "DispatchLogRecord",
    "InMemoryDispatchLogSink",
    "RecordingHandler",
    "ShortCircuitBehavior",
    "TraceBehavior",
]
