"""Application mapping – suffix mappings and MappingProfile."""
from __future__ import annotations

import dataclasses
from typing import Callable, TypeVar

from mp_mediator.application.mapping.registry import MappingRegistry
from mp_mediator.kernel.messaging import BehaviorModel, LockKey, MessageBody, ServiceIdentity

DEFAULT_BEHAVIOR_SUFFIX = " Behavior"

R = TypeVar("R", LockKey, BehaviorModel)


def suffix_mapping(record_type: type[R], suffix: str) -> Callable[[MessageBody], R]:
    """Build a pure mapping ``payload -> record_type(name=payload.name + suffix)``.

    The suffix is fixed when the mapping is built and never read back from a
    previously derived record.
    """

    def _map(body: MessageBody) -> R:
        return record_type(name=f"{body.name}{suffix}")

    _map.__qualname__ = f"suffix_mapping<{record_type.__name__}{suffix!r}>"
    return _map


@dataclasses.dataclass(frozen=True)
class MappingProfile:
    """Mapping configuration for one (payload type, service) pair.

    :meth:`apply` registers the lock-key mapping for the pair and, unless one
    already exists for the payload type, the behavior-model mapping.

    Usage::

        MappingProfile(
            GetCustomerMessageBody,
            ServiceIdentity("GetCustomerService"),
            lock_key_suffix=" GetCustomerService",
        ).apply(registry)
    """

    payload_type: type[MessageBody]
    service: ServiceIdentity
    lock_key_suffix: str
    behavior_suffix: str = DEFAULT_BEHAVIOR_SUFFIX

    def __post_init__(self) -> None:
        object.__setattr__(self, "service", ServiceIdentity.coerce(self.service))

    def lock_key_mapping(self) -> Callable[[MessageBody], LockKey]:
        return suffix_mapping(LockKey, self.lock_key_suffix)

    def behavior_mapping(self) -> Callable[[MessageBody], BehaviorModel]:
        return suffix_mapping(BehaviorModel, self.behavior_suffix)

    def apply(self, registry: MappingRegistry) -> None:
        registry.register_mapping(self.payload_type, self.service, self.lock_key_mapping())
        # first profile for a payload type owns its behavior model
        if not registry.has_behavior_mapping(self.payload_type):
            registry.register_behavior_mapping(self.payload_type, self.behavior_mapping())


__all__ = ["DEFAULT_BEHAVIOR_SUFFIX", "MappingProfile", "suffix_mapping"]
