"""Application CQRS – HandlerRegistry and Route."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Mapping

from mp_mediator.application.cqrs.handlers import CommandHandler
from mp_mediator.kernel.errors import AmbiguousHandlerError, NoHandlerRegisteredError, RegistryFrozenError
from mp_mediator.kernel.messaging import CommandKey, ServiceIdentity


@dataclasses.dataclass(frozen=True)
class Route:
    """A resolved handler together with the service it belongs to."""

    key: CommandKey
    handler: CommandHandler[Any, Any]
    service: ServiceIdentity

    @property
    def handler_name(self) -> str:
        return type(self.handler).__name__


class HandlerRegistry:
    """Maps each :class:`CommandKey` to its single handler.

    With ``eager=True`` a second registration for a key raises
    :class:`AmbiguousHandlerError` immediately. With ``eager=False`` the
    duplicate is kept and :meth:`resolve` raises instead.
    """

    def __init__(self, *, eager: bool = True) -> None:
        self._eager = eager
        self._routes: dict[CommandKey, tuple[Route, ...]] = {}
        self._frozen = False

    def register(
        self,
        command_type: Any,
        handler: CommandHandler[Any, Any],
        service: ServiceIdentity | str | None = None,
    ) -> Route:
        """Register *handler* for *command_type* (``Command[Body]`` or a ``CommandKey``)."""
        if self._frozen:
            raise RegistryFrozenError("HandlerRegistry")
        key = CommandKey.of(command_type)
        identity = (
            ServiceIdentity.coerce(service)
            if service is not None
            else ServiceIdentity.for_handler(handler)
        )
        existing = self._routes.get(key, ())
        if existing and self._eager:
            raise AmbiguousHandlerError(key, count=len(existing) + 1)
        route = Route(key=key, handler=handler, service=identity)
        self._routes[key] = existing + (route,)
        return route

    def resolve(self, key: CommandKey) -> Route:
        routes = self._routes.get(key, ())
        if not routes:
            raise NoHandlerRegisteredError(key)
        if len(routes) > 1:
            raise AmbiguousHandlerError(key, count=len(routes))
        return routes[0]

    def validate(self) -> None:
        """Raise for the first key that has more than one handler."""
        for key, routes in self._routes.items():
            if len(routes) > 1:
                raise AmbiguousHandlerError(key, count=len(routes))

    def freeze(self) -> None:
        if self._frozen:
            return
        self._routes = MappingProxyType(dict(self._routes))  # type: ignore[assignment]
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def routes(self) -> Mapping[CommandKey, tuple[Route, ...]]:
        return MappingProxyType(self._routes)

    def __contains__(self, command_type: Any) -> bool:
        return CommandKey.of(command_type) in self._routes

    def __len__(self) -> int:
        return len(self._routes)


__all__ = ["HandlerRegistry", "Route"]
