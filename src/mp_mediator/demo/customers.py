"""Demo – GetCustomerService and DownloadCustomerService.

Both services share the payload shape but each owns its payload class,
handler and lock-key suffix. ``python -m mp_mediator.demo`` dispatches one
command to each and logs::

    dispatch.correlated command_type=Command[GetCustomerMessageBody]
        lock_key='Nam Le GetCustomerService' behavior='Nam Le Behavior'
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

from mp_mediator.application.cqrs import CommandHandler, Dispatcher, DispatcherBuilder
from mp_mediator.config.settings import EnvSettingsLoader, MediatorSettings
from mp_mediator.kernel.messaging import Command, CommandResponse, MessageBody, ServiceIdentity
from mp_mediator.observability.logging import DispatchLogSink, JsonLoggerFactory, get_logger

GET_CUSTOMER_SERVICE = ServiceIdentity("GetCustomerService")
DOWNLOAD_CUSTOMER_SERVICE = ServiceIdentity("DownloadCustomerService")

_log = get_logger(__name__)


@dataclasses.dataclass
class GetCustomerMessageBody(MessageBody):
    pass


@dataclasses.dataclass
class DownloadCustomerMessageBody(MessageBody):
    pass


class GetCustomerHandler(CommandHandler[Command[GetCustomerMessageBody], CommandResponse]):
    async def handle(self, command: Command[GetCustomerMessageBody]) -> CommandResponse:
        _log.info("customer.handled", service=GET_CUSTOMER_SERVICE.name, customer=command.body.name)
        return CommandResponse()


class DownloadCustomerHandler(CommandHandler[Command[DownloadCustomerMessageBody], CommandResponse]):
    async def handle(self, command: Command[DownloadCustomerMessageBody]) -> CommandResponse:
        _log.info("customer.handled", service=DOWNLOAD_CUSTOMER_SERVICE.name, customer=command.body.name)
        return CommandResponse()


def build_dispatcher(
    settings: MediatorSettings | None = None,
    *,
    sink: DispatchLogSink | None = None,
) -> Dispatcher:
    """Composition root for the demo services."""
    return (
        DispatcherBuilder(settings, sink=sink)
        .service(
            Command[GetCustomerMessageBody],
            GetCustomerHandler(),
            service=GET_CUSTOMER_SERVICE,
            lock_key_suffix=" GetCustomerService",
        )
        .service(
            Command[DownloadCustomerMessageBody],
            DownloadCustomerHandler(),
            service=DOWNLOAD_CUSTOMER_SERVICE,
            lock_key_suffix=" DownloadCustomerService",
        )
        .build()
    )


async def run(dispatcher: Dispatcher) -> list[Any]:
    return [
        await dispatcher.dispatch(Command(body=GetCustomerMessageBody(name="Nam Le"))),
        await dispatcher.dispatch(Command(body=DownloadCustomerMessageBody(name="Anh Le"))),
    ]


def main() -> None:
    settings = EnvSettingsLoader().load(MediatorSettings)
    JsonLoggerFactory.configure(settings.log_level, json_output=settings.json_logs)
    asyncio.run(run(build_dispatcher(settings)))


__all__ = [
    "DOWNLOAD_CUSTOMER_SERVICE",
    "GET_CUSTOMER_SERVICE",
    "DownloadCustomerHandler",
    "DownloadCustomerMessageBody",
    "GetCustomerHandler",
    "GetCustomerMessageBody",
    "build_dispatcher",
    "main",
    "run",
]
