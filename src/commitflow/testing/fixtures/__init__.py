"""Testing fixtures – pytest fixtures for fake doubles.

Enable in your ``conftest.py``::

    pytest_plugins = ["commitflow.testing.fixtures"]
"""
from commitflow.testing.fixtures.uow import (
    fake_domain_event_dispatcher,
    fake_exception_reporter,
    fake_unit_of_work,
    unit_of_work_manager,
)

__all__ = [
    "fake_domain_event_dispatcher",
    "fake_exception_reporter",
    "fake_unit_of_work",
    "unit_of_work_manager",
]
