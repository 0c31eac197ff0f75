"""Observability – structured logging and exception reporting.

``LogExceptionReporter`` lives in :mod:`commitflow.observability.reporter`.
"""
from commitflow.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
