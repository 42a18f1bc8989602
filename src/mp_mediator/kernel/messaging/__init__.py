"""Kernel messaging – payloads, command envelopes and derived records."""
from mp_mediator.kernel.messaging.message import Command, CommandKey, CommandResponse, MessageBody
from mp_mediator.kernel.messaging.records import BehaviorModel, LockKey, ServiceIdentity

__all__ = [
    "BehaviorModel",
    "Command",
    "CommandKey",
    "CommandResponse",
    "LockKey",
    "MessageBody",
    "ServiceIdentity",
]
