"""Application pipeline – Pipeline class."""
from __future__ import annotations

from enum import Enum
from typing import Any

from mp_mediator.application.pipeline.behavior import Next, PipelineBehavior, Terminal
from mp_mediator.kernel.errors import HandlerNotInvokedError, RegistryFrozenError
from mp_mediator.observability.logging import get_logger


class ShortCircuitPolicy(str, Enum):
    """What to do when a chain finishes without reaching the handler."""

    RAISE = "raise"
    WARN = "warn"
    ALLOW = "allow"


def _describe(command: Any) -> str:
    key = getattr(command, "key", None)
    return str(key) if key is not None else type(command).__name__


class Pipeline:
    """Builds and executes an ordered chain of behaviors around a handler.

    Behaviors run in ascending ``order``; equal orders keep the order in
    which they were added. The handler is always the innermost step.
    """

    def __init__(
        self,
        *,
        short_circuit_policy: ShortCircuitPolicy | str = ShortCircuitPolicy.RAISE,
        logger: Any = None,
    ) -> None:
        self._entries: list[tuple[int, int, PipelineBehavior]] = []
        self._frozen = False
        self._policy = ShortCircuitPolicy(short_circuit_policy)
        self._log = logger if logger is not None else get_logger(__name__)

    def add(self, behavior: PipelineBehavior, order: int = 0) -> "Pipeline":
        """Insert *behavior* at *order* (fluent API)."""
        if self._frozen:
            raise RegistryFrozenError("Pipeline")
        self._entries.append((order, len(self._entries), behavior))
        self._entries.sort(key=lambda entry: (entry[0], entry[1]))
        return self

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def behaviors(self) -> tuple[PipelineBehavior, ...]:
        return tuple(entry[2] for entry in self._entries)

    @property
    def short_circuit_policy(self) -> ShortCircuitPolicy:
        return self._policy

    def compose(self, command: Any, terminal: Next) -> Next:
        """Wrap *terminal* innermost-first into a single zero-arg callable."""
        chain = terminal
        for behavior in reversed(self.behaviors):

            async def _step(*, _b: PipelineBehavior = behavior, _n: Next = chain) -> Any:
                return await _b(command, _n)

            chain = _step
        return chain

    async def execute(self, command: Any, handler: Terminal) -> Any:
        """Execute the full chain, ending with ``handler(command)``."""
        invocations = 0

        async def _terminal() -> Any:
            nonlocal invocations
            invocations += 1
            return await handler(command)

        result = await self.compose(command, _terminal)()
        if invocations == 0:
            self._on_short_circuit(command)
        return result

    def _on_short_circuit(self, command: Any) -> None:
        name = _describe(command)
        if self._policy is ShortCircuitPolicy.RAISE:
            raise HandlerNotInvokedError(name)
        if self._policy is ShortCircuitPolicy.WARN:
            self._log.warning("dispatch.handler_not_invoked", command=name)


__all__ = ["Pipeline", "ShortCircuitPolicy"]
