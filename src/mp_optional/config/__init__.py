"""Config – 12-factor settings and their errors."""

from mp_optional.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_optional.config.settings import EnvSettingsLoader, LoggingSettings, Settings

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LoggingSettings",
    "MissingRequiredSettingError",
    "Settings",
]
