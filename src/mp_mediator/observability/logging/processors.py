"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class DispatchContextProcessor:
    """structlog processor that tags events emitted during a dispatch.

    Adds ``command_key`` and ``service`` when a
    :class:`~mp_mediator.application.pipeline.DispatchContext` is active.
    Existing keys are left untouched.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from mp_mediator.application.pipeline.context import DispatchContext

        ctx = DispatchContext.current()
        if ctx is not None:
            event_dict.setdefault("command_key", str(ctx.key))
            event_dict.setdefault("service", ctx.service.name)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound with *initial_values*."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["DispatchContextProcessor", "get_logger"]
