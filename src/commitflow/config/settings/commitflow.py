"""Config settings – CommitflowSettings."""
from __future__ import annotations

import dataclasses
import logging

from commitflow.config.validation import InvalidSettingValueError

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_LEVEL_FIELDS = ("log_level", "dispatch_log_level", "dispatched_log_level")


def level_number(name: str) -> int:
    """Map a level name (any case) to its stdlib :mod:`logging` number."""
    try:
        return _LEVELS[name.upper()]
    except KeyError:
        raise InvalidSettingValueError("level", name, f"expected one of {sorted(_LEVELS)}") from None


@dataclasses.dataclass(frozen=True)
class CommitflowSettings:
    """Tunables for the unit of work middleware and logging.

    Example::

        settings = EnvSettingsLoader().load()
        JsonLoggerFactory.from_settings(settings)
        middleware = ExecuteInUnitOfWork.from_settings(manager, settings)
    """

    uow_attempts: int = 1
    log_level: str = "INFO"
    log_json: bool = True
    dispatch_log_level: str = "DEBUG"
    dispatched_log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.uow_attempts < 1:
            raise InvalidSettingValueError("uow_attempts", self.uow_attempts, "must be at least 1")
        for name in _LEVEL_FIELDS:
            value = getattr(self, name)
            if value.upper() not in _LEVELS:
                raise InvalidSettingValueError(name, value, f"expected one of {sorted(_LEVELS)}")


__all__ = ["CommitflowSettings", "level_number"]
