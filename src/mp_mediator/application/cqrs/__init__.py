"""Application CQRS – command handlers, handler registry and dispatcher."""
from mp_mediator.application.cqrs.builder import KEY_DERIVATION_ORDER, DispatcherBuilder
from mp_mediator.application.cqrs.decorators import clear_registries, command_handler, make_dispatcher
from mp_mediator.application.cqrs.dispatcher import Dispatcher
from mp_mediator.application.cqrs.handlers import CommandHandler
from mp_mediator.application.cqrs.registry import HandlerRegistry, Route
from mp_mediator.application.pipeline.context import DispatchContext

__all__ = [
    "KEY_DERIVATION_ORDER",
    "CommandHandler",
    "DispatchContext",
    "Dispatcher",
    "DispatcherBuilder",
    "HandlerRegistry",
    "Route",
    "clear_registries",
    "command_handler",
    "make_dispatcher",
]
