"""Application events – UnitOfWorkAwareDispatcher."""
from __future__ import annotations

import functools

from commitflow.application.events.dispatcher import Dispatcher
from commitflow.application.events.handler import EventHandler, ListenerTiming
from commitflow.application.events.listeners import ListenerContainer
from commitflow.application.pipeline import PipeContainer
from commitflow.application.uow.manager import UnitOfWorkManager
from commitflow.kernel.ddd import DomainEvent, occurs_immediately


class UnitOfWorkAwareDispatcher(Dispatcher):
    """Dispatch events relative to the active unit of work.

    Events that do not occur immediately are dispatched from a single
    before-commit callback. When an event is dispatched, listeners marked
    :class:`~commitflow.application.uow.DispatchBeforeCommit` or
    :class:`~commitflow.application.uow.DispatchAfterCommit` are queued on
    the manager; all other listeners run straight away.
    """

    def __init__(
        self,
        manager: UnitOfWorkManager,
        listeners: ListenerContainer | None = None,
        middleware: PipeContainer | None = None,
    ) -> None:
        super().__init__(listeners, middleware)
        self._manager = manager

    def dispatch(self, event: DomainEvent) -> None:
        if occurs_immediately(event):
            self._dispatch_now(event)
            return

        self._manager.before_commit(functools.partial(self._dispatch_now, event))

    def _execute(self, event: DomainEvent, handler: EventHandler) -> None:
        match handler.timing:
            case ListenerTiming.BEFORE_COMMIT:
                self._manager.before_commit(functools.partial(handler, event))
            case ListenerTiming.AFTER_COMMIT:
                self._manager.after_commit(functools.partial(handler, event))
            case _:
                handler(event)


__all__ = ["UnitOfWorkAwareDispatcher"]
