"""Application mapping – MappingRegistry.

Lock-key mappings are keyed by the (payload type, service) pair, so the same
payload class can yield different keys depending on the target service.
Behavior-model mappings are keyed by payload type alone.

Usage::

    registry = MappingRegistry()
    registry.register_mapping(
        GetCustomerMessageBody,
        "GetCustomerService",
        suffix_mapping(LockKey, " GetCustomerService"),
    )
    registry.freeze()
    registry.derive_lock_key(command, ServiceIdentity("GetCustomerService"))
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

from mp_mediator.kernel.errors import AmbiguousMappingError, RegistryFrozenError, UnmappedTypeError
from mp_mediator.kernel.messaging import BehaviorModel, Command, LockKey, MessageBody, ServiceIdentity

LockKeyMapping = Callable[[Any], LockKey]
BehaviorMapping = Callable[[Any], BehaviorModel]


class MappingRegistry:
    """Process-wide table of pure derivation functions.

    Populated once at composition time, then frozen. After :meth:`freeze`
    the tables are read-only proxies and safe for concurrent reads.
    """

    def __init__(self) -> None:
        self._lock_keys: dict[tuple[type[MessageBody], ServiceIdentity], LockKeyMapping] = {}
        self._behaviors: dict[type[MessageBody], BehaviorMapping] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_mapping(
        self,
        payload_type: type[MessageBody],
        service: ServiceIdentity | str,
        fn: LockKeyMapping,
    ) -> None:
        """Register the lock-key mapping for *payload_type* under *service*."""
        self._ensure_mutable()
        identity = ServiceIdentity.coerce(service)
        key = (payload_type, identity)
        if key in self._lock_keys:
            raise AmbiguousMappingError(payload_type, service=identity, record="LockKey")
        self._lock_keys[key] = fn

    def register_behavior_mapping(self, payload_type: type[MessageBody], fn: BehaviorMapping) -> None:
        """Register the behavior-model mapping for *payload_type*."""
        self._ensure_mutable()
        if payload_type in self._behaviors:
            raise AmbiguousMappingError(payload_type, record="BehaviorModel")
        self._behaviors[payload_type] = fn

    def freeze(self) -> None:
        if self._frozen:
            return
        self._lock_keys = MappingProxyType(dict(self._lock_keys))  # type: ignore[assignment]
        self._behaviors = MappingProxyType(dict(self._behaviors))  # type: ignore[assignment]
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def has_mapping(self, payload_type: type[MessageBody], service: ServiceIdentity | str) -> bool:
        return (payload_type, ServiceIdentity.coerce(service)) in self._lock_keys

    def has_behavior_mapping(self, payload_type: type[MessageBody]) -> bool:
        return payload_type in self._behaviors

    @property
    def lock_key_mappings(self) -> Mapping[tuple[type[MessageBody], ServiceIdentity], LockKeyMapping]:
        return MappingProxyType(self._lock_keys)

    @property
    def behavior_mappings(self) -> Mapping[type[MessageBody], BehaviorMapping]:
        return MappingProxyType(self._behaviors)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def derive_lock_key(self, command: Command[Any], service: ServiceIdentity | str) -> LockKey:
        """Return a fresh :class:`LockKey` for *command* as seen by *service*.

        Raises :class:`UnmappedTypeError` when no mapping exists for the exact
        payload class and service pair.
        """
        identity = ServiceIdentity.coerce(service)
        payload_type = type(command.body)
        fn = self._lock_keys.get((payload_type, identity))
        if fn is None:
            raise UnmappedTypeError(payload_type, service=identity, record="LockKey")
        return fn(command.body)

    def derive_behavior_model(self, command: Command[Any]) -> BehaviorModel:
        """Return a fresh :class:`BehaviorModel` for *command*."""
        payload_type = type(command.body)
        fn = self._behaviors.get(payload_type)
        if fn is None:
            raise UnmappedTypeError(payload_type, record="BehaviorModel")
        return fn(command.body)

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("MappingRegistry")


__all__ = ["BehaviorMapping", "LockKeyMapping", "MappingRegistry"]
