"""Application events – DeferredDispatcher."""
from __future__ import annotations

from collections import deque

from commitflow.application.events.dispatcher import Dispatcher
from commitflow.application.events.listeners import ListenerContainer
from commitflow.application.pipeline import PipeContainer
from commitflow.kernel.ddd import DomainEvent, occurs_immediately


class DeferredDispatcher(Dispatcher):
    """Queue events until :meth:`flush`; ``OccursImmediately`` events skip the queue.

    Events dispatched by listeners while the queue is flushing are
    appended and delivered before :meth:`flush` returns. If a listener
    raises, whatever is still queued is forgotten before the error
    propagates.
    """

    def __init__(
        self,
        listeners: ListenerContainer | None = None,
        middleware: PipeContainer | None = None,
    ) -> None:
        super().__init__(listeners, middleware)
        self._deferred: deque[DomainEvent] = deque()

    def __len__(self) -> int:
        return len(self._deferred)

    def dispatch(self, event: DomainEvent) -> None:
        if occurs_immediately(event):
            self._dispatch_now(event)
            return

        self._deferred.append(event)

    def flush(self) -> None:
        try:
            while self._deferred:
                self._dispatch_now(self._deferred.popleft())
        finally:
            self._deferred.clear()

    def forget(self) -> None:
        self._deferred.clear()


__all__ = ["DeferredDispatcher"]
