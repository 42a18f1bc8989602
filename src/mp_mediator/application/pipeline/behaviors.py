"""Application pipeline – built-in behaviors."""
from __future__ import annotations

import time
from typing import Any

from mp_mediator.application.mapping import MappingRegistry
from mp_mediator.application.pipeline.behavior import Next, PipelineBehavior
from mp_mediator.application.pipeline.context import DispatchContext
from mp_mediator.kernel.messaging import ServiceIdentity
from mp_mediator.observability.logging import DispatchLogSink, get_logger


class KeyDerivationBehavior(PipelineBehavior):
    """Derive the lock key and behavior model, log them, then continue.

    The target service comes from the active :class:`DispatchContext`; a
    fixed *service* may be given for pipelines executed outside a
    dispatcher. Derivation happens before ``next_`` so an unmapped payload
    aborts the dispatch without running the handler. Errors from ``next_``
    are not caught.
    """

    def __init__(
        self,
        mappings: MappingRegistry,
        sink: DispatchLogSink,
        *,
        service: ServiceIdentity | str | None = None,
    ) -> None:
        self._mappings = mappings
        self._sink = sink
        self._service = ServiceIdentity.coerce(service) if service is not None else None

    async def __call__(self, command: Any, next_: Next) -> Any:
        ctx = DispatchContext.current()
        if ctx is not None:
            service, command_name = ctx.service, str(ctx.key)
        elif self._service is not None:
            service, command_name = self._service, str(command.key)
        else:
            raise RuntimeError("KeyDerivationBehavior needs a DispatchContext or a fixed service")

        lock_key = self._mappings.derive_lock_key(command, service)
        behavior_model = self._mappings.derive_behavior_model(command)
        self._sink.record(command_name, lock_key.name, behavior_model.name)
        return await next_()


class TimingBehavior(PipelineBehavior):
    """Log completion or failure of the inner chain with its duration."""

    def __init__(self, logger: Any = None) -> None:
        self._log = logger if logger is not None else get_logger(__name__)

    async def __call__(self, command: Any, next_: Next) -> Any:
        name = str(getattr(command, "key", type(command).__name__))
        start = time.perf_counter()
        try:
            result = await next_()
        except Exception as exc:
            duration = (time.perf_counter() - start) * 1000
            self._log.error(
                "dispatch.failed",
                command=name,
                duration_ms=round(duration, 2),
                error=type(exc).__name__,
            )
            raise
        duration = (time.perf_counter() - start) * 1000
        self._log.info("dispatch.completed", command=name, duration_ms=round(duration, 2))
        return result


__all__ = ["KeyDerivationBehavior", "TimingBehavior"]
