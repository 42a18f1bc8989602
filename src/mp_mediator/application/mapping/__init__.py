"""Application mapping – derive LockKey / BehaviorModel records from payloads."""
from mp_mediator.application.mapping.profile import DEFAULT_BEHAVIOR_SUFFIX, MappingProfile, suffix_mapping
from mp_mediator.application.mapping.registry import BehaviorMapping, LockKeyMapping, MappingRegistry

__all__ = [
    "DEFAULT_BEHAVIOR_SUFFIX",
    "BehaviorMapping",
    "LockKeyMapping",
    "MappingProfile",
    "MappingRegistry",
    "suffix_mapping",
]
