"""Testing fakes – in-memory doubles for the unit of work and dispatch ports."""
from commitflow.testing.fakes.reporter import FakeExceptionReporter
from commitflow.testing.fakes.unit_of_work import FakeUnitOfWork
from commitflow.testing.fakes.dispatcher import FakeDomainEventDispatcher

__all__ = ["FakeDomainEventDispatcher", "FakeExceptionReporter", "FakeUnitOfWork"]
