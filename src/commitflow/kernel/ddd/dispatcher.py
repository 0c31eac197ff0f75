"""DomainEventDispatcher port: how business code raises events."""

from __future__ import annotations

from typing import Protocol

from commitflow.kernel.ddd.domain_event import DomainEvent


class DomainEventDispatcher(Protocol):
    """Port: hand a domain event to whoever reacts to it.

    Whether listeners run now, after an explicit flush, or around the
    commit of the active unit of work is up to the implementation.
    """

    def dispatch(self, event: DomainEvent) -> None:
        """Dispatch *event* to its listeners."""
        ...


__all__ = ["DomainEventDispatcher"]
