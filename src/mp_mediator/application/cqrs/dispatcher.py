"""Application CQRS – Dispatcher: routes a command through the Pipeline.

Usage::

    dispatcher = Dispatcher()
    dispatcher.register_handler(Command[GetCustomerMessageBody], GetCustomerHandler(),
                                service="GetCustomerService")
    dispatcher.register_mapping(GetCustomerMessageBody, "GetCustomerService",
                                suffix_mapping(LockKey, " GetCustomerService"))
    dispatcher.register_behavior(KeyDerivationBehavior(dispatcher.mappings, sink))
    response = await dispatcher.dispatch(Command(body=GetCustomerMessageBody(name="Nam Le")))

Registries freeze on the first dispatch; registering afterwards raises
:class:`~mp_mediator.kernel.errors.RegistryFrozenError`.
"""
from __future__ import annotations

from typing import Any

from mp_mediator.application.cqrs.handlers import CommandHandler
from mp_mediator.application.cqrs.registry import HandlerRegistry, Route
from mp_mediator.application.mapping import BehaviorMapping, LockKeyMapping, MappingRegistry
from mp_mediator.application.pipeline import DispatchContext, Pipeline, PipelineBehavior
from mp_mediator.kernel.messaging import Command, MessageBody, ServiceIdentity
from mp_mediator.observability.logging import get_logger


class Dispatcher:
    """Resolves the single handler for a command's exact key and runs it
    as the innermost step of the behavior pipeline.

    Dispatch is a direct call chain: no queueing, retries or timeouts. The
    only shared state is the frozen registries, so concurrent dispatches
    need no locking.
    """

    def __init__(
        self,
        handlers: HandlerRegistry | None = None,
        mappings: MappingRegistry | None = None,
        pipeline: Pipeline | None = None,
        *,
        logger: Any = None,
    ) -> None:
        self._handlers = handlers if handlers is not None else HandlerRegistry()
        self._mappings = mappings if mappings is not None else MappingRegistry()
        self._pipeline = pipeline if pipeline is not None else Pipeline()
        self._log = logger if logger is not None else get_logger(__name__)
        self._frozen = False

    # ------------------------------------------------------------------
    # Registration API
    # ------------------------------------------------------------------

    def register_handler(
        self,
        command_type: Any,
        handler: CommandHandler[Any, Any],
        *,
        service: ServiceIdentity | str | None = None,
    ) -> Route:
        return self._handlers.register(command_type, handler, service)

    def register_mapping(
        self,
        payload_type: type[MessageBody],
        service: ServiceIdentity | str,
        fn: LockKeyMapping,
    ) -> None:
        self._mappings.register_mapping(payload_type, service, fn)

    def register_behavior_mapping(self, payload_type: type[MessageBody], fn: BehaviorMapping) -> None:
        self._mappings.register_behavior_mapping(payload_type, fn)

    def register_behavior(self, behavior: PipelineBehavior, order: int = 0) -> None:
        self._pipeline.add(behavior, order)

    def freeze(self) -> None:
        """Freeze every registry; idempotent."""
        if self._frozen:
            return
        self._handlers.freeze()
        self._mappings.freeze()
        self._pipeline.freeze()
        self._frozen = True
        self._log.debug(
            "dispatcher.frozen",
            handlers=len(self._handlers),
            behaviors=len(self._pipeline.behaviors),
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def handlers(self) -> HandlerRegistry:
        return self._handlers

    @property
    def mappings(self) -> MappingRegistry:
        return self._mappings

    @property
    def pipeline(self) -> Pipeline:
        return self._pipeline

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def dispatch(self, command: Command[Any]) -> Any:
        """Run *command* through the behaviors and its handler; return the result."""
        if not isinstance(command, Command):
            raise TypeError(f"dispatch() expects a Command, got {type(command).__name__}")
        self.freeze()

        route = self._handlers.resolve(command.key)
        ctx = DispatchContext(key=route.key, service=route.service, handler_name=route.handler_name)
        token = DispatchContext.bind(ctx)
        try:
            return await self._pipeline.execute(command, route.handler.handle)
        finally:
            DispatchContext.reset(token)


__all__ = ["Dispatcher"]
