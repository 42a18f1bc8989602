"""Handler faults – unexpected failures inside handler business logic."""

from __future__ import annotations

from typing import Any

from mp_mediator.kernel.errors.base import BaseError


class HandlerFault(BaseError):
    """Raised by a handler for an unexpected (non-domain) failure.

    Declared domain failures belong in the handler's response. The pipeline
    never wraps or swallows a fault; it reaches the caller as raised.
    """

    default_code = "handler_fault"

    def __init__(
        self,
        message: str,
        *,
        handler: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.handler = handler
        if handler is not None:
            self.detail.setdefault("handler", handler)


__all__ = ["HandlerFault"]
