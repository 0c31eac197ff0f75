"""Config settings – env-based configuration for commitflow components."""
from commitflow.config.settings.commitflow import CommitflowSettings, level_number
from commitflow.config.settings.loaders import EnvSettingsLoader

__all__ = ["CommitflowSettings", "EnvSettingsLoader", "level_number"]
