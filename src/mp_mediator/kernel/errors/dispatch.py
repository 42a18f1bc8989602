"""Dispatch errors – routing, key derivation and registry misconfiguration.

None of these are retryable: each one aborts the dispatch it was raised
in and reaches the caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mp_mediator.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from mp_mediator.kernel.messaging import CommandKey, ServiceIdentity


def _type_name(tp: type) -> str:
    return getattr(tp, "__qualname__", repr(tp))


class DispatchError(BaseError):
    """Base for failures raised by the dispatch pipeline itself."""

    default_code = "dispatch_error"


class UnmappedTypeError(DispatchError):
    """No key-derivation mapping exists for a payload type.

    ``record`` names the derived record that was requested (``LockKey`` or
    ``BehaviorModel``); ``service`` is set for lock-key lookups, which are
    keyed by the (payload type, service) pair.
    """

    default_code = "unmapped_type"

    def __init__(
        self,
        payload_type: type,
        *,
        service: ServiceIdentity | None = None,
        record: str = "LockKey",
        **kwargs: Any,
    ) -> None:
        message = f"No {record} mapping registered for payload {_type_name(payload_type)!r}"
        if service is not None:
            message += f" and service {service.name!r}"
        detail: dict[str, Any] = {"payload_type": _type_name(payload_type), "record": record}
        if service is not None:
            detail["service"] = service.name
        super().__init__(message, detail=detail, **kwargs)
        self.payload_type = payload_type
        self.service = service
        self.record = record


class AmbiguousMappingError(DispatchError):
    """A mapping for the same key was registered twice."""

    default_code = "ambiguous_mapping"

    def __init__(
        self,
        payload_type: type,
        *,
        service: ServiceIdentity | None = None,
        record: str = "LockKey",
        **kwargs: Any,
    ) -> None:
        target = f" / {service.name!r}" if service is not None else ""
        super().__init__(
            f"{record} mapping for {_type_name(payload_type)!r}{target} is already registered",
            detail={"payload_type": _type_name(payload_type), "record": record},
            **kwargs,
        )
        self.payload_type = payload_type
        self.service = service
        self.record = record


class NoHandlerRegisteredError(DispatchError):
    """Zero handlers are registered for a command's concrete key."""

    default_code = "no_handler_registered"

    def __init__(self, key: CommandKey, **kwargs: Any) -> None:
        super().__init__(
            f"No handler registered for {key}",
            detail={"command_key": str(key)},
            **kwargs,
        )
        self.key = key


class AmbiguousHandlerError(DispatchError):
    """More than one handler is registered for a command's concrete key."""

    default_code = "ambiguous_handler"

    def __init__(self, key: CommandKey, count: int, **kwargs: Any) -> None:
        super().__init__(
            f"{count} handlers registered for {key}; exactly one is required",
            detail={"command_key": str(key), "count": count},
            **kwargs,
        )
        self.key = key
        self.count = count


class HandlerNotInvokedError(DispatchError):
    """The behavior chain completed without ever reaching the handler."""

    default_code = "handler_not_invoked"

    def __init__(self, command_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Pipeline completed for {command_name} but its handler was never invoked; "
            "a behavior did not await next_()",
            detail={"command": command_name},
            **kwargs,
        )
        self.command_name = command_name


class RegistryFrozenError(DispatchError):
    """Registration was attempted after the registry was frozen."""

    default_code = "registry_frozen"

    def __init__(self, registry: str, **kwargs: Any) -> None:
        super().__init__(
            f"{registry} is frozen; register everything before the first dispatch",
            detail={"registry": registry},
            **kwargs,
        )
        self.registry = registry


__all__ = [
    "AmbiguousHandlerError",
    "AmbiguousMappingError",
    "DispatchError",
    "HandlerNotInvokedError",
    "NoHandlerRegisteredError",
    "RegistryFrozenError",
    "UnmappedTypeError",
]
