"""Observability – DispatchLogSink port and its structlog adapter."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import structlog


@runtime_checkable
class DispatchLogSink(Protocol):
    """Port: receives one correlation record per dispatch."""

    def record(self, command_type_name: str, lock_key_name: str, behavior_name: str) -> None: ...


class StructlogDispatchSink:
    """Emit ``dispatch.correlated`` at INFO through structlog."""

    EVENT = "dispatch.correlated"

    def __init__(self, logger: Any = None) -> None:
        self._log = logger if logger is not None else structlog.get_logger("mp_mediator.dispatch")

    def record(self, command_type_name: str, lock_key_name: str, behavior_name: str) -> None:
        self._log.info(
            self.EVENT,
            command_type=command_type_name,
            lock_key=lock_key_name,
            behavior=behavior_name,
        )


__all__ = ["DispatchLogSink", "StructlogDispatchSink"]
