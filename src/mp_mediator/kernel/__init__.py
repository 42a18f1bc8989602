"""Kernel – framework-agnostic messages, derived records and errors."""

from mp_mediator.kernel.errors import (
    AmbiguousHandlerError,
    AmbiguousMappingError,
    BaseError,
    DispatchError,
    HandlerFault,
    HandlerNotInvokedError,
    NoHandlerRegisteredError,
    RegistryFrozenError,
    UnmappedTypeError,
)

__all__ = [
    "AmbiguousHandlerError",
    "AmbiguousMappingError",
    "BaseError",
    "DispatchError",
    "HandlerFault",
    "HandlerNotInvokedError",
    "NoHandlerRegisteredError",
    "RegistryFrozenError",
    "UnmappedTypeError",
]
