"""Application CQRS – DispatcherBuilder, the composition root.

Everything is registered once here, then :meth:`DispatcherBuilder.build`
returns a frozen :class:`Dispatcher`::

    dispatcher = (
        DispatcherBuilder(MediatorSettings())
        .service(
            Command[GetCustomerMessageBody],
            GetCustomerHandler(),
            service="GetCustomerService",
            lock_key_suffix=" GetCustomerService",
        )
        .behavior(TimingBehavior(), order=-10)
        .build()
    )
"""
from __future__ import annotations

from typing import Any

from mp_mediator.application.cqrs.dispatcher import Dispatcher
from mp_mediator.application.cqrs.handlers import CommandHandler
from mp_mediator.application.cqrs.registry import HandlerRegistry
from mp_mediator.application.mapping import (
    BehaviorMapping,
    LockKeyMapping,
    MappingProfile,
    MappingRegistry,
)
from mp_mediator.application.pipeline import KeyDerivationBehavior, Pipeline, PipelineBehavior
from mp_mediator.config.settings import MediatorSettings
from mp_mediator.kernel.messaging import CommandKey, MessageBody, ServiceIdentity
from mp_mediator.observability.logging import DispatchLogSink, StructlogDispatchSink, get_logger

# Behaviors added with the default order 0 run outside key derivation.
KEY_DERIVATION_ORDER = 100


class DispatcherBuilder:
    """Collect handlers, mappings and behaviors, then build a frozen dispatcher."""

    def __init__(
        self,
        settings: MediatorSettings | None = None,
        *,
        sink: DispatchLogSink | None = None,
        logger: Any = None,
    ) -> None:
        self._settings = settings if settings is not None else MediatorSettings()
        self._sink = sink
        self._log = logger if logger is not None else get_logger(__name__)
        self._handlers = HandlerRegistry(eager=self._settings.eager_handler_validation)
        self._mappings = MappingRegistry()
        self._behaviors: list[tuple[PipelineBehavior, int]] = []
        self._built = False

    @property
    def settings(self) -> MediatorSettings:
        return self._settings

    @property
    def mappings(self) -> MappingRegistry:
        return self._mappings

    def handler(
        self,
        command_type: Any,
        handler: CommandHandler[Any, Any],
        *,
        service: ServiceIdentity | str | None = None,
    ) -> "DispatcherBuilder":
        self._handlers.register(command_type, handler, service)
        return self

    def mapping(
        self,
        payload_type: type[MessageBody],
        service: ServiceIdentity | str,
        fn: LockKeyMapping,
    ) -> "DispatcherBuilder":
        self._mappings.register_mapping(payload_type, service, fn)
        return self

    def behavior_mapping(self, payload_type: type[MessageBody], fn: BehaviorMapping) -> "DispatcherBuilder":
        self._mappings.register_behavior_mapping(payload_type, fn)
        return self

    def profile(self, profile: MappingProfile) -> "DispatcherBuilder":
        profile.apply(self._mappings)
        return self

    def service(
        self,
        command_type: Any,
        handler: CommandHandler[Any, Any],
        *,
        service: ServiceIdentity | str,
        lock_key_suffix: str,
        behavior_suffix: str | None = None,
    ) -> "DispatcherBuilder":
        """Register a handler and its mapping profile in one step."""
        identity = ServiceIdentity.coerce(service)
        key = CommandKey.of(command_type)
        self.handler(key, handler, service=identity)
        return self.profile(
            MappingProfile(
                payload_type=key.body_type,
                service=identity,
                lock_key_suffix=lock_key_suffix,
                behavior_suffix=(
                    behavior_suffix if behavior_suffix is not None else self._settings.behavior_suffix
                ),
            )
        )

    def behavior(self, behavior: PipelineBehavior, order: int = 0) -> "DispatcherBuilder":
        self._behaviors.append((behavior, order))
        return self

    def build(self) -> Dispatcher:
        """Return a frozen :class:`Dispatcher`; a builder builds only once."""
        if self._built:
            raise RuntimeError("DispatcherBuilder.build() may only be called once")
        if self._settings.eager_handler_validation:
            self._handlers.validate()

        pipeline = Pipeline(short_circuit_policy=self._settings.short_circuit_policy)
        for behavior, order in self._behaviors:
            pipeline.add(behavior, order)
        if self._settings.install_key_derivation:
            sink = self._sink if self._sink is not None else StructlogDispatchSink()
            pipeline.add(KeyDerivationBehavior(self._mappings, sink), KEY_DERIVATION_ORDER)

        dispatcher = Dispatcher(self._handlers, self._mappings, pipeline)
        dispatcher.freeze()
        self._built = True
        self._log.info(
            "dispatcher.built",
            handlers=len(self._handlers),
            lock_key_mappings=len(self._mappings.lock_key_mappings),
            behaviors=len(pipeline.behaviors),
        )
        return dispatcher


__all__ = ["KEY_DERIVATION_ORDER", "DispatcherBuilder"]
