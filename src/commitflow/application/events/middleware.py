"""Application events – LogDomainEventDispatch middleware."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from commitflow.application.pipeline.middleware import Middleware, Next
from commitflow.kernel.ddd import DomainEvent
from commitflow.observability.logging import get_logger

if TYPE_CHECKING:
    from commitflow.config.settings import CommitflowSettings


class LogDomainEventDispatch(Middleware):
    """Log before and after an event reaches its listeners."""

    def __init__(
        self,
        logger: Any | None = None,
        dispatch_level: int = logging.DEBUG,
        dispatched_level: int = logging.INFO,
    ) -> None:
        self._logger = logger if logger is not None else get_logger(__name__)
        self._dispatch_level = dispatch_level
        self._dispatched_level = dispatched_level

    @classmethod
    def from_settings(cls, settings: "CommitflowSettings", logger: Any | None = None) -> "LogDomainEventDispatch":
        from commitflow.config.settings import level_number

        return cls(
            logger,
            dispatch_level=level_number(settings.dispatch_log_level),
            dispatched_level=level_number(settings.dispatched_log_level),
        )

    def __call__(self, request: DomainEvent, next_: Next) -> Any:
        name = type(request).__name__
        self._logger.log(self._dispatch_level, "domain_event.dispatching", event_type=name)
        result = next_(request)
        self._logger.log(self._dispatched_level, "domain_event.dispatched", event_type=name)
        return result


__all__ = ["LogDomainEventDispatch"]
