"""Kernel messaging – MessageBody, Command[T], CommandKey, CommandResponse.

A command's dispatch key is the pair (command class, payload class), so
``Command[GetCustomerMessageBody]`` and ``Command[DownloadCustomerMessageBody]``
route to different handlers even though both instances are ``Command``::

    command = Command(body=GetCustomerMessageBody(name="Nam Le"))
    command.key == CommandKey.of(Command[GetCustomerMessageBody])  # True
"""
from __future__ import annotations

import dataclasses
import typing
from typing import Any, ClassVar, Generic, TypeVar


@dataclasses.dataclass
class MessageBody:
    """Named payload carried by a :class:`Command`.

    ``name`` is expected to be non-empty but this is not enforced. Fields
    stay mutable so tests and builders can fill them in step by step.
    """

    name: str


B = TypeVar("B", bound=MessageBody)


@dataclasses.dataclass(frozen=True)
class CommandKey:
    """Exact routing identity of a command: envelope class plus payload class."""

    command_type: type
    body_type: type

    @classmethod
    def of(cls, command_type: Any) -> "CommandKey":
        """Normalise a registration target into a key.

        Accepts a ``CommandKey``, a parameterised alias such as
        ``Command[SomeBody]``, or a ``Command`` subclass that pins its payload
        with a ``body_type`` class attribute.
        """
        if isinstance(command_type, CommandKey):
            return command_type

        origin = typing.get_origin(command_type)
        if origin is not None:
            args = typing.get_args(command_type)
            if (
                isinstance(origin, type)
                and issubclass(origin, Command)
                and len(args) == 1
                and isinstance(args[0], type)
                and issubclass(args[0], MessageBody)
            ):
                return cls(origin, args[0])
            raise TypeError(f"{command_type!r} is not a Command[MessageBody] alias")

        if isinstance(command_type, type) and issubclass(command_type, Command):
            body_type = command_type.body_type
            if body_type is None:
                raise TypeError(
                    f"{command_type.__qualname__} is not parameterised; register "
                    f"{command_type.__qualname__}[SomeBody] or set body_type"
                )
            return cls(command_type, body_type)

        raise TypeError(f"Cannot derive a command key from {command_type!r}")

    def __str__(self) -> str:
        return f"{self.command_type.__qualname__}[{self.body_type.__qualname__}]"


@dataclasses.dataclass
class Command(Generic[B]):
    """Envelope wrapping one :class:`MessageBody`; the unit of dispatch."""

    body_type: ClassVar[type[MessageBody] | None] = None

    body: B

    @property
    def key(self) -> CommandKey:
        return CommandKey(type(self), type(self.body))


@dataclasses.dataclass(frozen=True)
class CommandResponse:
    """Result returned by a handler.

    The default instance is an empty success marker. Declared domain
    failures are reported with :meth:`failure` instead of raising.
    """

    succeeded: bool = True
    data: Any = None
    errors: tuple[str, ...] = ()

    @classmethod
    def ok(cls, data: Any = None) -> "CommandResponse":
        return cls(succeeded=True, data=data)

    @classmethod
    def failure(cls, *errors: str, data: Any = None) -> "CommandResponse":
        if not errors:
            raise ValueError("failure() needs at least one error message")
        return cls(succeeded=False, data=data, errors=tuple(errors))


__all__ = ["Command", "CommandKey", "CommandResponse", "MessageBody"]
