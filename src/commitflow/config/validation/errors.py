"""Config validation errors."""
from __future__ import annotations

from commitflow.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Commitflow settings could not be built."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting holds a value commitflow cannot use.

    *setting* is the environment variable name when the value came from the
    environment, otherwise the settings field name.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting}' has invalid value {value!r}: {reason}",
            detail={"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
