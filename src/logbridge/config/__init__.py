"""Config – 12-factor settings and loaders."""

from logbridge.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LoggingSettings,
    Settings,
    SettingsLoader,
)
from logbridge.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
