"""Application CQRS – @command_handler auto-registration and make_dispatcher."""
from __future__ import annotations

from typing import Any, Iterable

from mp_mediator.application.cqrs.builder import DispatcherBuilder
from mp_mediator.application.cqrs.dispatcher import Dispatcher
from mp_mediator.application.cqrs.handlers import CommandHandler
from mp_mediator.application.mapping import MappingProfile
from mp_mediator.application.pipeline import PipelineBehavior
from mp_mediator.config.settings import MediatorSettings
from mp_mediator.kernel.messaging import CommandKey, ServiceIdentity
from mp_mediator.observability.logging import DispatchLogSink

# ---------------------------------------------------------------------------
# Global registry populated at import time by the decorator
# ---------------------------------------------------------------------------

_HANDLER_REGISTRY: list[tuple[CommandKey, type[CommandHandler[Any, Any]], ServiceIdentity | None]] = []


def command_handler(command_type: Any, *, service: ServiceIdentity | str | None = None):
    """Class decorator that registers a :class:`CommandHandler` for *command_type*.

    Usage::

        @command_handler(Command[GetCustomerMessageBody], service="GetCustomerService")
        class GetCustomerHandler(CommandHandler[Command[GetCustomerMessageBody], CommandResponse]):
            async def handle(self, command):
                return CommandResponse()

    The handler is instantiated (no-arg constructor) by :func:`make_dispatcher`.
    Decorating two handlers for the same key is reported there as an
    :class:`~mp_mediator.kernel.errors.AmbiguousHandlerError`.
    """
    key = CommandKey.of(command_type)
    identity = ServiceIdentity.coerce(service) if service is not None else None

    def decorator(handler_class: type[CommandHandler[Any, Any]]) -> type[CommandHandler[Any, Any]]:
        _HANDLER_REGISTRY.append((key, handler_class, identity))
        return handler_class

    return decorator


def make_dispatcher(
    settings: MediatorSettings | None = None,
    *,
    sink: DispatchLogSink | None = None,
    profiles: Iterable[MappingProfile] = (),
    behaviors: Iterable[tuple[PipelineBehavior, int]] = (),
) -> Dispatcher:
    """Build a frozen :class:`Dispatcher` from the decorator registry."""
    builder = DispatcherBuilder(settings, sink=sink)
    for key, handler_class, identity in _HANDLER_REGISTRY:
        builder.handler(key, handler_class(), service=identity)
    for profile in profiles:
        builder.profile(profile)
    for behavior, order in behaviors:
        builder.behavior(behavior, order)
    return builder.build()


def clear_registries() -> None:
    """Clear the decorator registry.

    .. warning::
        This mutates module-level state.  Only call in tests.
    """
    _HANDLER_REGISTRY.clear()


__all__ = ["clear_registries", "command_handler", "make_dispatcher"]
