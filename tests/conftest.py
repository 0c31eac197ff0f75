"""Shared pytest configuration: exposes the commitflow testing fixtures."""

from commitflow.testing.fixtures import (  # noqa: F401
    fake_domain_event_dispatcher,
    fake_exception_reporter,
    fake_unit_of_work,
    unit_of_work_manager,
)
