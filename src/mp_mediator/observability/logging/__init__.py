"""Observability – structured logging ports and helpers."""
from mp_mediator.observability.logging.factory import JsonLoggerFactory
from mp_mediator.observability.logging.processors import DispatchContextProcessor, get_logger
from mp_mediator.observability.logging.sink import DispatchLogSink, StructlogDispatchSink

__all__ = [
    "DispatchContextProcessor",
    "DispatchLogSink",
    "JsonLoggerFactory",
    "StructlogDispatchSink",
    "get_logger",
]
