"""Application UoW – driven ports: UnitOfWork, TransactionManager, ExceptionReporter."""
from __future__ import annotations

import abc
from typing import Callable, TypeVar

T = TypeVar("T")


class UnitOfWork(abc.ABC):
    """Port: the transactional boundary.

    Runs *callback* inside a transaction, committing on success and rolling
    back on failure. The callback may be invoked up to *attempts* times; when
    every attempt fails the last error is raised untouched.
    """

    @abc.abstractmethod
    def execute(self, callback: Callable[[], T], attempts: int = 1) -> T: ...


class TransactionManager(abc.ABC):
    """Port: manage transaction lifecycle (begin/commit/rollback)."""

    @abc.abstractmethod
    def begin(self) -> None: ...

    @abc.abstractmethod
    def commit(self) -> None: ...

    @abc.abstractmethod
    def rollback(self) -> None: ...


class ExceptionReporter(abc.ABC):
    """Port: record an exception that is being swallowed. Must never raise."""

    @abc.abstractmethod
    def report(self, error: BaseException) -> None: ...


__all__ = ["ExceptionReporter", "TransactionManager", "UnitOfWork"]
