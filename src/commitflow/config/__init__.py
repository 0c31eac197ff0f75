"""Config – environment-driven settings for commitflow components."""

from commitflow.config.settings import CommitflowSettings, EnvSettingsLoader, level_number
from commitflow.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "CommitflowSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "level_number",
]
