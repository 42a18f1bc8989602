"""Kernel messaging – derived records and service identity."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class ServiceIdentity:
    """Names the service a handler belongs to; part of the lock-key mapping key."""

    name: str

    @classmethod
    def coerce(cls, value: "ServiceIdentity | str") -> "ServiceIdentity":
        if isinstance(value, ServiceIdentity):
            return value
        if isinstance(value, str) and value:
            return cls(value)
        raise TypeError(f"Expected ServiceIdentity or non-empty str, got {value!r}")

    @classmethod
    def for_handler(cls, handler: Any) -> "ServiceIdentity":
        return cls(type(handler).__name__)

    def __str__(self) -> str:
        return self.name


@dataclasses.dataclass(frozen=True)
class LockKey:
    """Correlation / uniqueness token derived from a command's payload."""

    name: str


@dataclasses.dataclass(frozen=True)
class BehaviorModel:
    """Display form of a command, used in the per-dispatch log record."""

    name: str


__all__ = ["BehaviorModel", "LockKey", "ServiceIdentity"]
