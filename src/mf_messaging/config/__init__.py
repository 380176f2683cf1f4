"""Config – 12-factor settings and loaders."""

from mf_messaging.config.settings import (
    BrokerSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from mf_messaging.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "BrokerSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
