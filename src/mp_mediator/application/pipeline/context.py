"""Application pipeline – DispatchContext.

The dispatcher binds one context per dispatch in a ``ContextVar`` so that
behaviors can see the resolved route (command key, target service, handler)
without the behavior signature carrying it. Concurrent dispatches each see
their own context.
"""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar, Token

from mp_mediator.kernel.messaging import CommandKey, ServiceIdentity


@dataclasses.dataclass(frozen=True)
class DispatchContext:
    """Route information for the dispatch currently in progress."""

    key: CommandKey
    service: ServiceIdentity
    handler_name: str

    @staticmethod
    def bind(ctx: "DispatchContext") -> Token["DispatchContext | None"]:
        return _CTX_VAR.set(ctx)

    @staticmethod
    def reset(token: Token["DispatchContext | None"]) -> None:
        _CTX_VAR.reset(token)

    @staticmethod
    def current() -> "DispatchContext | None":
        return _CTX_VAR.get()

    @staticmethod
    def require() -> "DispatchContext":
        ctx = _CTX_VAR.get()
        if ctx is None:
            raise RuntimeError("No DispatchContext in current context; call Dispatcher.dispatch()")
        return ctx


_CTX_VAR: ContextVar[DispatchContext | None] = ContextVar("_mp_dispatch_ctx", default=None)


__all__ = ["DispatchContext"]
