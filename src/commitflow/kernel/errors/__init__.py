"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError
        ├── ProgrammingError         (never retried by the UoW manager)
        │   ├── InvalidArgumentError
        │   ├── PreconditionError
        │   └── ContractError
        │       └── UnresolvedBindingError
        └── AbortOnFailureError
"""

from commitflow.kernel.errors.application import (
    AbortOnFailureError,
    ApplicationError,
    ContractError,
    InvalidArgumentError,
    PreconditionError,
    ProgrammingError,
    UnresolvedBindingError,
)
from commitflow.kernel.errors.base import BaseError

__all__ = [
    "AbortOnFailureError",
    "ApplicationError",
    "BaseError",
    "ContractError",
    "InvalidArgumentError",
    "PreconditionError",
    "ProgrammingError",
    "UnresolvedBindingError",
]
