"""Config validation errors – raised while building broker settings."""
from __future__ import annotations

from mf_messaging.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Base class for configuration failures."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting was supplied but cannot be used.

    ``setting_name`` is the environment key when the value came from the
    environment, else the settings field name.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
