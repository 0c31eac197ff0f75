"""Observability – LogExceptionReporter.

Production implementation of the ``ExceptionReporter`` port: swallowed
exceptions (e.g. a unit of work attempt that will be retried) are written
to the structured log instead of disappearing.
"""
from __future__ import annotations

from typing import Any

from commitflow.application.uow.ports import ExceptionReporter
from commitflow.kernel.errors import BaseError
from commitflow.observability.logging import get_logger


class LogExceptionReporter(ExceptionReporter):
    """Report exceptions as ``exception.reported`` error log entries.

    Every entry carries ``error`` and ``error_type``; a
    :class:`~commitflow.kernel.errors.BaseError` adds ``error_code`` and,
    when it has any, ``error_detail``.
    """

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger if logger is not None else get_logger(__name__)

    def report(self, error: BaseException) -> None:
        fields: dict[str, Any] = {
            "error": self._message(error),
            "error_type": type(error).__name__,
        }
        if isinstance(error, BaseError):
            fields.update(error.log_fields())
        self._logger.error("exception.reported", exc_info=error, **fields)

    @staticmethod
    def _message(error: BaseException) -> str:
        if isinstance(error, BaseError):
            return error.message
        return str(error) or f"Unexpected error: {type(error).__name__}"


__all__ = ["LogExceptionReporter"]
