"""Config settings – MediatorSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_mediator.config.settings.base import Settings
from mp_mediator.config.validation import InvalidSettingValueError

_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})
_POLICIES = frozenset({"raise", "warn", "allow"})


@dataclasses.dataclass
class MediatorSettings(Settings):
    """Knobs for the dispatcher and its logging, read from ``MEDIATOR_*``.

    ``eager_handler_validation``
        Reject a second handler for the same command key at registration.
        When off, the conflict surfaces on the first dispatch of that key.
    ``short_circuit_policy``
        ``raise``, ``warn`` or ``allow`` when a behavior skips the handler.
    ``install_key_derivation``
        Add the lock-key/behavior-model logging behavior to every pipeline.
    """

    _prefix: ClassVar[str] = "MEDIATOR"

    log_level: str = "INFO"
    json_logs: bool = True
    eager_handler_validation: bool = True
    short_circuit_policy: str = "raise"
    behavior_suffix: str = " Behavior"
    install_key_derivation: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, f"expected one of {sorted(_LEVELS)}")
        self.short_circuit_policy = self.short_circuit_policy.lower()
        if self.short_circuit_policy not in _POLICIES:
            raise InvalidSettingValueError(
                "short_circuit_policy", self.short_circuit_policy, f"expected one of {sorted(_POLICIES)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["MediatorSettings"]
