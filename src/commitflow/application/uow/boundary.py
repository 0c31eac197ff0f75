"""Application UoW – UnitOfWork adapter over a TransactionManager."""
from __future__ import annotations

from typing import Callable, TypeVar

from commitflow.application.uow.ports import TransactionManager, UnitOfWork
from commitflow.kernel.errors import InvalidArgumentError, ProgrammingError
from commitflow.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


class TransactionManagerUnitOfWork(UnitOfWork):
    """Run callbacks between ``begin()`` and ``commit()``, rolling back on error.

    A failed attempt (callback or commit raised) is rolled back and retried
    until *attempts* is exhausted, then the last error is re-raised as is.
    If the rollback itself fails, the attempt's error still propagates and
    the rollback failure is attached to it as a note.
    """

    def __init__(self, transactions: TransactionManager) -> None:
        self._transactions = transactions

    def execute(self, callback: Callable[[], T], attempts: int = 1) -> T:
        if attempts < 1:
            raise InvalidArgumentError("Attempts must be greater than zero.")

        for _ in range(attempts - 1):
            try:
                return self._attempt(callback)
            except ProgrammingError:
                raise
            except Exception:  # noqa: BLE001 – rolled back, next attempt
                continue
        return self._attempt(callback)

    def _attempt(self, callback: Callable[[], T]) -> T:
        self._transactions.begin()
        try:
            result = callback()
            self._transactions.commit()
        except BaseException as exc:
            self._rollback(exc)
            raise
        return result

    def _rollback(self, error: BaseException) -> None:
        try:
            self._transactions.rollback()
        except Exception as rollback_error:
            _log.error(
                "unit_of_work.rollback_failed",
                error_type=type(error).__name__,
                rollback_error_type=type(rollback_error).__name__,
                exc_info=rollback_error,
            )
            error.add_note(f"Rollback failed: {rollback_error!r}")


__all__ = ["TransactionManagerUnitOfWork"]
