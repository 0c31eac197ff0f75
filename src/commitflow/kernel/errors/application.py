"""Application-layer errors: misuse of the unit of work and dispatch APIs."""

from __future__ import annotations

from typing import Any

from commitflow.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ProgrammingError(ApplicationError):
    """A caller broke the API contract.

    These are raised immediately and are never retried, reported or
    swallowed by the unit of work manager.
    """

    default_code = "programming_error"


class InvalidArgumentError(ProgrammingError):
    """An argument is outside its permitted range or shape."""

    default_code = "invalid_argument"


class PreconditionError(ProgrammingError):
    """An operation was called in a unit of work phase that forbids it."""

    default_code = "precondition_failed"


class ContractError(ProgrammingError):
    """A listener or middleware does not honour the expected contract."""

    default_code = "contract_violation"


class UnresolvedBindingError(ContractError):
    """No binding exists for a listener or pipe name."""

    default_code = "unresolved_binding"

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Unrecognised {kind} name: {name}", detail={"kind": kind, "name": name})
        self.kind = kind
        self.name = name


class AbortOnFailureError(ApplicationError):
    """Carries a failed result out of a unit of work so it rolls back."""

    default_code = "aborted_on_failure"

    def __init__(self, result: Any) -> None:
        super().__init__("Aborting unit of work due to failed result.")
        self.result = result


__all__ = [
    "AbortOnFailureError",
    "ApplicationError",
    "ContractError",
    "InvalidArgumentError",
    "PreconditionError",
    "ProgrammingError",
    "UnresolvedBindingError",
]
