"""Config settings – 12-factor env-based configuration."""
from logbridge.config.settings.base import Settings
from logbridge.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from logbridge.config.settings.logging import LoggingSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "LoggingSettings", "Settings", "SettingsLoader"]
