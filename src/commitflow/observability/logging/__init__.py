"""Observability – structlog configuration and logger helpers."""
from commitflow.observability.logging.factory import JsonLoggerFactory
from commitflow.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
