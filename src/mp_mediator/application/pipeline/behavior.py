"""Application pipeline – PipelineBehavior base."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable

Next = Callable[[], Awaitable[Any]]
Terminal = Callable[[Any], Awaitable[Any]]


class PipelineBehavior(abc.ABC):
    """Single interceptor in the chain around a handler.

    Implementations must ``await next_()`` to continue the chain; returning
    without doing so skips the handler (see ``ShortCircuitPolicy``).
    """

    @abc.abstractmethod
    async def __call__(self, command: Any, next_: Next) -> Any: ...


__all__ = ["Next", "PipelineBehavior", "Terminal"]
