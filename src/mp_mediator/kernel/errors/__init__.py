"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DispatchError              (dispatch.py)
    │   ├── UnmappedTypeError
    │   ├── AmbiguousMappingError
    │   ├── NoHandlerRegisteredError
    │   ├── AmbiguousHandlerError
    │   ├── HandlerNotInvokedError
    │   └── RegistryFrozenError
    └── HandlerFault               (handler.py)

Configuration errors live in :mod:`mp_mediator.config.validation`.
"""

from mp_mediator.kernel.errors.base import BaseError
from mp_mediator.kernel.errors.dispatch import (
    AmbiguousHandlerError,
    AmbiguousMappingError,
    DispatchError,
    HandlerNotInvokedError,
    NoHandlerRegisteredError,
    RegistryFrozenError,
    UnmappedTypeError,
)
from mp_mediator.kernel.errors.handler import HandlerFault

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
