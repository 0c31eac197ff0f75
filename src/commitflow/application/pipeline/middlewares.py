"""Application pipeline – unit of work middleware for command/query buses."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from commitflow.application.pipeline.middleware import Middleware, Next
from commitflow.application.uow.manager import UnitOfWorkManager
from commitflow.kernel.errors import AbortOnFailureError
from commitflow.kernel.types import is_failure

if TYPE_CHECKING:
    from commitflow.config.settings import CommitflowSettings


class DeferredEvents(Protocol):
    """What :class:`FlushDeferredEvents` needs from a deferred dispatcher."""

    def flush(self) -> None: ...

    def forget(self) -> None: ...


class ExecuteInUnitOfWork(Middleware):
    """Handle the message inside a unit of work.

    A handler returning an ``Err`` rolls the unit of work back (so no
    before/after-commit callback runs) and the ``Err`` is returned as is.
    """

    def __init__(self, manager: UnitOfWorkManager, attempts: int = 1) -> None:
        self._manager = manager
        self._attempts = attempts

    @classmethod
    def from_settings(cls, manager: UnitOfWorkManager, settings: "CommitflowSettings") -> "ExecuteInUnitOfWork":
        return cls(manager, attempts=settings.uow_attempts)

    def __call__(self, request: Any, next_: Next) -> Any:
        def _handle() -> Any:
            result = next_(request)
            if is_failure(result):
                raise AbortOnFailureError(result)
            return result

        try:
            return self._manager.execute(_handle, self._attempts)
        except AbortOnFailureError as exc:
            return exc.result


class FlushDeferredEvents(Middleware):
    """Flush deferred domain events on success, forget them otherwise."""

    def __init__(self, dispatcher: DeferredEvents) -> None:
        self._dispatcher = dispatcher

    def __call__(self, request: Any, next_: Next) -> Any:
        try:
            result = next_(request)
        except Exception:
            self._dispatcher.forget()
            raise

        if is_failure(result):
            self._dispatcher.forget()
        else:
            self._dispatcher.flush()

        return result


__all__ = ["DeferredEvents", "ExecuteInUnitOfWork", "FlushDeferredEvents"]
