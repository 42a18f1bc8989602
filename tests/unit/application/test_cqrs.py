"""Unit tests for CQRS – HandlerRegistry and Dispatcher."""

from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

import pytest

from mp_mediator.application.cqrs import CommandHandler, DispatchContext, Dispatcher, HandlerRegistry
from mp_mediator.application.mapping import suffix_mapping
from mp_mediator.application.pipeline import KeyDerivationBehavior, Next, PipelineBehavior
from mp_mediator.kernel.errors import (
    AmbiguousHandlerError,
    HandlerFault,
    NoHandlerRegisteredError,
    RegistryFrozenError,
    UnmappedTypeError,
)
from mp_mediator.kernel.messaging import (
    BehaviorModel,
    Command,
    CommandKey,
    CommandResponse,
    LockKey,
    MessageBody,
    ServiceIdentity,
)
from mp_mediator.testing.fakes import InMemoryDispatchLogSink, RecordingHandler, TraceBehavior


@dataclasses.dataclass
class CreateOrderBody(MessageBody):
    item: str = ""


@dataclasses.dataclass
class CancelOrderBody(MessageBody):
    pass


class CreateOrderHandler(CommandHandler[Command[CreateOrderBody], CommandResponse]):
    def __init__(self) -> None:
        self.handled: list[str] = []

    async def handle(self, command: Command[CreateOrderBody]) -> CommandResponse:
        self.handled.append(command.body.item)
        return CommandResponse.ok(command.body.item)


class _ContextProbe(PipelineBehavior):
    def __init__(self) -> None:
        self.seen: list[DispatchContext] = []

    async def __call__(self, command: Any, next_: Next) -> Any:
        self.seen.append(DispatchContext.require())
        return await next_()


# ---------------------------------------------------------------------------
# HandlerRegistry
# ---------------------------------------------------------------------------


class TestHandlerRegistry:
    def test_register_and_resolve(self) -> None:
        registry = HandlerRegistry()
        handler = CreateOrderHandler()
        route = registry.register(Command[CreateOrderBody], handler, "Orders")
        assert registry.resolve(CommandKey.of(Command[CreateOrderBody])) == route
        assert route.service == ServiceIdentity("Orders")
        assert route.handler_name == "CreateOrderHandler"

    def test_service_defaults_to_handler_class(self) -> None:
        route = HandlerRegistry().register(Command[CreateOrderBody], CreateOrderHandler())
        assert route.service == ServiceIdentity("CreateOrderHandler")

    def test_resolve_unknown_key(self) -> None:
        with pytest.raises(NoHandlerRegisteredError):
            HandlerRegistry().resolve(CommandKey.of(Command[CreateOrderBody]))

    def test_eager_duplicate_raises_at_registration(self) -> None:
        registry = HandlerRegistry()
        registry.register(Command[CreateOrderBody], CreateOrderHandler())
        with pytest.raises(AmbiguousHandlerError) as exc_info:
            registry.register(Command[CreateOrderBody], CreateOrderHandler())
        assert exc_info.value.count == 2

    def test_lazy_duplicate_raises_at_resolve(self) -> None:
        registry = HandlerRegistry(eager=False)
        registry.register(Command[CreateOrderBody], CreateOrderHandler())
        registry.register(Command[CreateOrderBody], CreateOrderHandler())
        with pytest.raises(AmbiguousHandlerError):
            registry.resolve(CommandKey.of(Command[CreateOrderBody]))
        with pytest.raises(AmbiguousHandlerError):
            registry.validate()

    def test_frozen_rejects_registration(self) -> None:
        registry = HandlerRegistry()
        registry.freeze()
        with pytest.raises(RegistryFrozenError):
            registry.register(Command[CreateOrderBody], CreateOrderHandler())

    def test_contains_and_len(self) -> None:
        registry = HandlerRegistry()
        registry.register(Command[CreateOrderBody], CreateOrderHandler())
        assert Command[CreateOrderBody] in registry
        assert Command[CancelOrderBody] not in registry
        assert len(registry) == 1

    def test_routes_view_is_read_only(self) -> None:
        registry = HandlerRegistry()
        registry.register(Command[CreateOrderBody], CreateOrderHandler())
        with pytest.raises(TypeError):
            registry.routes[CommandKey.of(Command[CancelOrderBody])] = ()  # type: ignore[index]


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class TestDispatcher:
    def test_dispatch_invokes_registered_handler(self) -> None:
        dispatcher = Dispatcher()
        handler = CreateOrderHandler()
        dispatcher.register_handler(Command[CreateOrderBody], handler)

        result = asyncio.run(dispatcher.dispatch(Command(body=CreateOrderBody(name="o", item="apple"))))
        assert handler.handled == ["apple"]
        assert result == CommandResponse.ok("apple")

    def test_dispatch_routes_by_payload_type(self) -> None:
        create, cancel = RecordingHandler("create"), RecordingHandler("cancel")
        dispatcher = Dispatcher()
        dispatcher.register_handler(Command[CreateOrderBody], create)
        dispatcher.register_handler(Command[CancelOrderBody], cancel)

        async def _run() -> list[Any]:
            return [
                await dispatcher.dispatch(Command(body=CancelOrderBody(name="x"))),
                await dispatcher.dispatch(Command(body=CancelOrderBody(name="y"))),
            ]

        assert asyncio.run(_run()) == ["cancel", "cancel"]
        assert create.calls == 0
        assert cancel.calls == 2

    def test_unregistered_command_raises(self) -> None:
        dispatcher = Dispatcher()
        with pytest.raises(NoHandlerRegisteredError, match="CreateOrderBody"):
            asyncio.run(dispatcher.dispatch(Command(body=CreateOrderBody(name="x"))))

    def test_non_command_rejected(self) -> None:
        with pytest.raises(TypeError):
            asyncio.run(Dispatcher().dispatch(CreateOrderBody(name="x")))  # type: ignore[arg-type]

    def test_lazy_ambiguity_surfaces_on_dispatch(self) -> None:
        handlers = HandlerRegistry(eager=False)
        first, second = RecordingHandler(), RecordingHandler()
        dispatcher = Dispatcher(handlers)
        dispatcher.register_handler(Command[CreateOrderBody], first)
        dispatcher.register_handler(Command[CreateOrderBody], second)
        with pytest.raises(AmbiguousHandlerError):
            asyncio.run(dispatcher.dispatch(Command(body=CreateOrderBody(name="x"))))
        assert first.calls == second.calls == 0

    def test_first_dispatch_freezes_registries(self) -> None:
        dispatcher = Dispatcher()
        dispatcher.register_handler(Command[CreateOrderBody], RecordingHandler())
        asyncio.run(dispatcher.dispatch(Command(body=CreateOrderBody(name="x"))))
        assert dispatcher.frozen
        with pytest.raises(RegistryFrozenError):
            dispatcher.register_handler(Command[CancelOrderBody], RecordingHandler())
        with pytest.raises(RegistryFrozenError):
            dispatcher.register_mapping(CreateOrderBody, "Orders", suffix_mapping(LockKey, ""))
        with pytest.raises(RegistryFrozenError):
            dispatcher.register_behavior(TraceBehavior("late", []))

    def test_behaviors_see_dispatch_context(self) -> None:
        probe = _ContextProbe()
        dispatcher = Dispatcher()
        dispatcher.register_handler(Command[CreateOrderBody], CreateOrderHandler(), service="Orders")
        dispatcher.register_behavior(probe)
        asyncio.run(dispatcher.dispatch(Command(body=CreateOrderBody(name="x"))))

        (ctx,) = probe.seen
        assert ctx.key == CommandKey.of(Command[CreateOrderBody])
        assert ctx.service == ServiceIdentity("Orders")
        assert ctx.handler_name == "CreateOrderHandler"
        assert DispatchContext.current() is None

    def test_context_is_reset_after_failure(self) -> None:
        dispatcher = Dispatcher()
        dispatcher.register_handler(Command[CreateOrderBody], RecordingHandler(error=HandlerFault("boom")))

        async def _run() -> None:
            with pytest.raises(HandlerFault):
                await dispatcher.dispatch(Command(body=CreateOrderBody(name="x")))
            assert DispatchContext.current() is None

        asyncio.run(_run())

    def test_concurrent_dispatches_keep_their_own_context(self) -> None:
        probe = _ContextProbe()

        class _Slow(RecordingHandler):
            async def handle(self, command: Any) -> Any:
                await asyncio.sleep(0)
                return DispatchContext.require().service.name

        dispatcher = Dispatcher()
        dispatcher.register_handler(Command[CreateOrderBody], _Slow(), service="Orders")
        dispatcher.register_handler(Command[CancelOrderBody], _Slow(), service="Cancellations")
        dispatcher.register_behavior(probe)

        async def _run() -> list[Any]:
            return list(
                await asyncio.gather(
                    dispatcher.dispatch(Command(body=CreateOrderBody(name="a"))),
                    dispatcher.dispatch(Command(body=CancelOrderBody(name="b"))),
                )
            )

        assert asyncio.run(_run()) == ["Orders", "Cancellations"]

    def test_key_derivation_through_dispatcher(self) -> None:
        sink = InMemoryDispatchLogSink()
        handler = RecordingHandler()
        dispatcher = Dispatcher()
        dispatcher.register_handler(Command[CreateOrderBody], handler, service="Orders")
        dispatcher.register_mapping(CreateOrderBody, "Orders", suffix_mapping(LockKey, " Orders"))
        dispatcher.register_behavior_mapping(CreateOrderBody, suffix_mapping(BehaviorModel, " Behavior"))
        dispatcher.register_behavior(KeyDerivationBehavior(dispatcher.mappings, sink))

        asyncio.run(dispatcher.dispatch(Command(body=CreateOrderBody(name="Nam Le"))))
        assert sink.records == [("Command[CreateOrderBody]", "Nam Le Orders", "Nam Le Behavior")]
        assert handler.calls == 1

    def test_mapping_for_other_service_is_not_used(self) -> None:
        sink = InMemoryDispatchLogSink()
        handler = RecordingHandler()
        dispatcher = Dispatcher()
        dispatcher.register_handler(Command[CreateOrderBody], handler, service="Orders")
        dispatcher.register_mapping(CreateOrderBody, "Billing", suffix_mapping(LockKey, " Billing"))
        dispatcher.register_behavior_mapping(CreateOrderBody, suffix_mapping(BehaviorModel, " Behavior"))
        dispatcher.register_behavior(KeyDerivationBehavior(dispatcher.mappings, sink))

        with pytest.raises(UnmappedTypeError):
            asyncio.run(dispatcher.dispatch(Command(body=CreateOrderBody(name="x"))))
        assert handler.calls == 0
