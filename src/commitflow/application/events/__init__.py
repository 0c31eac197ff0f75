"""Application events – immediate, deferred and unit-of-work-aware dispatchers."""
from commitflow.application.events.listeners import ListenerContainer
from commitflow.application.events.handler import EventHandler, ListenerTiming
from commitflow.application.events.dispatcher import Dispatcher, ListenerRef
from commitflow.application.events.deferred import DeferredDispatcher
from commitflow.application.events.uow_aware import UnitOfWorkAwareDispatcher
from commitflow.application.events.middleware import LogDomainEventDispatch

__all__ = [
    "DeferredDispatcher",
    "Dispatcher",
    "EventHandler",
    "ListenerContainer",
    "ListenerRef",
    "ListenerTiming",
    "LogDomainEventDispatch",
    "UnitOfWorkAwareDispatcher",
]
