"""Application events – EventHandler wrapping one resolved listener."""
from __future__ import annotations

import enum
from typing import Any, Callable

from commitflow.application.uow.markers import DispatchAfterCommit, DispatchBeforeCommit
from commitflow.kernel.ddd import DomainEvent
from commitflow.kernel.errors import ContractError


class ListenerTiming(enum.Enum):
    IMMEDIATE = "immediate"
    BEFORE_COMMIT = "before_commit"
    AFTER_COMMIT = "after_commit"


class EventHandler:
    """Invoke a listener, knowing when it wants to run.

    The listener's markers and its entry point (``handle`` or the callable
    itself) are checked once, here, so a malformed listener fails before
    any listener of the event has run.
    """

    __slots__ = ("_invoke", "_listener", "_timing")

    def __init__(self, listener: Any) -> None:
        before = isinstance(listener, DispatchBeforeCommit)
        after = isinstance(listener, DispatchAfterCommit)

        if before and after:
            raise ContractError(
                f'Listener "{type(listener).__name__}" cannot be dispatched both before '
                "and after a unit of work is committed."
            )

        self._listener = listener
        self._invoke = self._entry_point(listener)
        if before:
            self._timing = ListenerTiming.BEFORE_COMMIT
        elif after:
            self._timing = ListenerTiming.AFTER_COMMIT
        else:
            self._timing = ListenerTiming.IMMEDIATE

    @property
    def listener(self) -> Any:
        return self._listener

    @property
    def timing(self) -> ListenerTiming:
        return self._timing

    def __call__(self, event: DomainEvent) -> None:
        self._invoke(event)

    def __repr__(self) -> str:
        return f"EventHandler({self._listener!r}, timing={self._timing.value})"

    @staticmethod
    def _entry_point(listener: Any) -> Callable[[DomainEvent], Any]:
        if isinstance(listener, type):
            raise ContractError(
                f'Listener "{listener.__name__}" is a class; bind a factory that returns an instance.'
            )
        handle = getattr(listener, "handle", None)
        if callable(handle):
            return handle
        if callable(listener):
            return listener
        raise ContractError(
            f'Listener "{type(listener).__name__}" is not an object with a handle method or a callable.'
        )


__all__ = ["EventHandler", "ListenerTiming"]
