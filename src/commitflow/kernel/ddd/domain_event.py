"""Domain events and the occurs-immediately capability."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events.

    Subclasses should extend this and add their own payload fields.

    Example::

        @dataclasses.dataclass(frozen=True)
        class OrderPlaced(DomainEvent):
            order_id: str = ""
    """

    event_id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC)
    )

    @property
    def event_type(self) -> str:
        return type(self).__name__


class OccursImmediately:
    """Marker: the event is dispatched synchronously, never deferred.

    Example::

        @dataclasses.dataclass(frozen=True)
        class StockReserved(DomainEvent, OccursImmediately):
            sku: str = ""
    """


def occurs_immediately(event: object) -> bool:
    return isinstance(event, OccursImmediately)


__all__ = ["DomainEvent", "OccursImmediately", "occurs_immediately"]
