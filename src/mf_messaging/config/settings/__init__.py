"""Config settings – 12-factor env-based configuration."""
from mf_messaging.config.settings.base import Settings
from mf_messaging.config.settings.broker import BrokerSettings
from mf_messaging.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["BrokerSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
