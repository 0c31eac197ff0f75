"""Application events – Dispatcher (immediate dispatch).

Example::

    listeners = ListenerContainer()
    listeners.bind("audit", lambda: AuditListener(repo))

    dispatcher = Dispatcher(listeners)
    dispatcher.listen(OrderPlaced, ["audit", lambda event: metrics.inc()])
    dispatcher.through([LogDomainEventDispatch()])
    dispatcher.dispatch(OrderPlaced(order_id="o-1"))
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from commitflow.application.events.handler import EventHandler
from commitflow.application.events.listeners import ListenerContainer
from commitflow.application.pipeline import MiddlewareRef, PipeContainer, Pipeline
from commitflow.kernel.ddd import DomainEvent
from commitflow.kernel.errors import ContractError, InvalidArgumentError

#: A listener name, an object with ``handle(event)``, or a plain callable.
ListenerRef = str | Callable[[DomainEvent], Any] | object


class Dispatcher:
    """Dispatch domain events synchronously through a middleware chain.

    Listeners are bound to the exact event class and invoked in the order
    they were attached. Every listener reference for the event is resolved
    before the first one runs.
    """

    def __init__(
        self,
        listeners: ListenerContainer | None = None,
        middleware: PipeContainer | None = None,
    ) -> None:
        self._listeners = listeners
        self._pipeline = Pipeline(middleware)
        self._bindings: dict[type[DomainEvent], list[ListenerRef]] = {}

    def through(self, pipes: Iterable[MiddlewareRef]) -> None:
        """Dispatch events through the provided middleware."""
        self._pipeline.through(pipes)

    def listen(
        self,
        event_type: type[DomainEvent],
        listener: ListenerRef | list[ListenerRef] | tuple[ListenerRef, ...],
    ) -> None:
        refs = list(listener) if isinstance(listener, (list, tuple)) else [listener]
        bindings = self._bindings.setdefault(event_type, [])

        for ref in refs:
            if not self._can_attach(ref):
                raise InvalidArgumentError(
                    "Expecting listener to be a non-empty string, a callable or a listener instance, not a class."
                )
            bindings.append(ref)

    def dispatch(self, event: DomainEvent) -> None:
        self._dispatch_now(event)

    def _dispatch_now(self, event: DomainEvent) -> None:
        self._pipeline.execute(event, self._notify)

    def _notify(self, event: DomainEvent) -> DomainEvent:
        for handler in self._handlers(type(event)):
            self._execute(event, handler)
        return event

    def _handlers(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        return [EventHandler(self._resolve(ref)) for ref in self._bindings.get(event_type, ())]

    def _resolve(self, ref: ListenerRef) -> Any:
        if not isinstance(ref, str):
            return ref
        if self._listeners is None:
            raise ContractError(f"Cannot resolve listener {ref!r} without a listener container.")
        return self._listeners.get(ref)

    def _execute(self, event: DomainEvent, handler: EventHandler) -> None:
        handler(event)

    @staticmethod
    def _can_attach(ref: Any) -> bool:
        if isinstance(ref, str):
            return bool(ref)
        if isinstance(ref, type):
            return False
        return callable(ref) or callable(getattr(ref, "handle", None))


__all__ = ["Dispatcher", "ListenerRef"]
