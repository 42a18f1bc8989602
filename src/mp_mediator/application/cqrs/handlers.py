"""Application CQRS – CommandHandler."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from mp_mediator.kernel.messaging import Command

C = TypeVar("C", bound=Command[Any])
R = TypeVar("R")


class CommandHandler(abc.ABC, Generic[C, R]):
    """Terminal business logic for exactly one command key."""

    @abc.abstractmethod
    async def handle(self, command: C) -> R: ...


__all__ = ["CommandHandler"]
