"""Application UoW – UnitOfWorkManager.

Coordinates before-commit and after-commit callbacks around a single
transactional attempt::

    manager = UnitOfWorkManager(unit_of_work, reporter=LogExceptionReporter())

    def place_order() -> OrderId:
        order = orders.create(...)
        manager.before_commit(lambda: outbox.stage(order))
        manager.after_commit(lambda: mailer.confirm(order))
        return order.id

    order_id = manager.execute(place_order, attempts=3)

Before-commit callbacks run after *callback* returns and before the
boundary commits; after-commit callbacks run once the commit succeeded.
Both queues are drained in registration order, including callbacks that
other callbacks of the same queue register while it drains.
"""
from __future__ import annotations

import enum
from collections import deque
from typing import Callable, TypeVar

from commitflow.application.uow.ports import ExceptionReporter, UnitOfWork
from commitflow.kernel.errors import InvalidArgumentError, PreconditionError, ProgrammingError
from commitflow.observability.logging import get_logger

T = TypeVar("T")

Callback = Callable[[], object]

_log = get_logger(__name__)


class UnitOfWorkPhase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMMITTING = "committing"
    COMMITTED = "committed"


class UnitOfWorkManager:
    """Own the callback queues of the currently executing unit of work.

    Only one unit of work may execute at a time. The manager runs the
    retry loop itself and hands each attempt to the boundary separately,
    so a failed attempt's callbacks are discarded before the next attempt
    starts. Failures of non-final attempts go to *reporter*; the final
    attempt's failure propagates unchanged.
    """

    def __init__(self, unit_of_work: UnitOfWork, reporter: ExceptionReporter | None = None) -> None:
        self._unit_of_work = unit_of_work
        self._reporter = reporter
        self._phase = UnitOfWorkPhase.IDLE
        self._before_commit: deque[Callback] = deque()
        self._after_commit: deque[Callback] = deque()

    @property
    def phase(self) -> UnitOfWorkPhase:
        return self._phase

    def execute(self, callback: Callable[[], T], attempts: int = 1) -> T:
        if self._phase is not UnitOfWorkPhase.IDLE:
            raise PreconditionError(
                "Not expecting unit of work manager to start a unit of work within an existing one."
            )

        if attempts < 1:
            raise InvalidArgumentError("Attempts must be greater than zero.", detail={"attempts": attempts})

        try:
            result = self._retry(callback, attempts)
            self._phase = UnitOfWorkPhase.COMMITTED
            _log.debug("unit_of_work.committed", after_commit=len(self._after_commit))
            self._drain(self._after_commit)
            return result
        finally:
            self._reset()

    def before_commit(self, callback: Callback) -> None:
        if self._phase in (UnitOfWorkPhase.RUNNING, UnitOfWorkPhase.COMMITTING):
            self._before_commit.append(callback)
            return

        if self._phase is UnitOfWorkPhase.COMMITTED:
            raise PreconditionError(
                "Cannot queue a before commit callback as unit of work has been committed."
            )

        raise PreconditionError("Cannot queue a before commit callback when not executing a unit of work.")

    def after_commit(self, callback: Callback) -> None:
        if self._phase is UnitOfWorkPhase.IDLE:
            raise PreconditionError("Cannot queue an after commit callback when not executing a unit of work.")

        self._after_commit.append(callback)

    def _retry(self, callback: Callable[[], T], attempts: int) -> T:
        for attempt in range(1, attempts):
            try:
                return self._attempt(callback)
            except ProgrammingError:
                raise
            except Exception as exc:
                _log.warning(
                    "unit_of_work.retrying",
                    attempt=attempt,
                    attempts=attempts,
                    error_type=type(exc).__name__,
                )
                if self._reporter is not None:
                    self._reporter.report(exc)
        return self._attempt(callback)

    def _attempt(self, callback: Callable[[], T]) -> T:
        try:
            return self._unit_of_work.execute(lambda: self._transaction(callback), 1)
        except BaseException:
            self._reset()
            raise

    def _transaction(self, callback: Callable[[], T]) -> T:
        self._phase = UnitOfWorkPhase.RUNNING
        value = callback()
        self._phase = UnitOfWorkPhase.COMMITTING
        self._drain(self._before_commit)
        return value

    @staticmethod
    def _drain(queue: deque[Callback]) -> None:
        while queue:
            queue.popleft()()

    def _reset(self) -> None:
        self._phase = UnitOfWorkPhase.IDLE
        self._before_commit.clear()
        self._after_commit.clear()


__all__ = ["UnitOfWorkManager", "UnitOfWorkPhase"]
