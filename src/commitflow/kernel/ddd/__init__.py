"""DDD building blocks: public re-export surface."""

from commitflow.kernel.ddd.dispatcher import DomainEventDispatcher
from commitflow.kernel.ddd.domain_event import (
    DomainEvent,
    OccursImmediately,
    occurs_immediately,
)

__all__ = [
    "DomainEvent",
    "DomainEventDispatcher",
    "OccursImmediately",
    "occurs_immediately",
]
