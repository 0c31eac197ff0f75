"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["commitflow.testing.fixtures"]
"""

from commitflow.testing.fakes import (
    FakeDomainEventDispatcher,
    FakeExceptionReporter,
    FakeUnitOfWork,
)

__all__ = ["FakeDomainEventDispatcher", "FakeExceptionReporter", "FakeUnitOfWork"]
