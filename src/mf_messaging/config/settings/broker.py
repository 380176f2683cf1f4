"""Config settings – BrokerSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mf_messaging.config.settings.base import Settings
from mf_messaging.config.validation import InvalidSettingValueError
from mf_messaging.kernel.messaging import EVENT_MESSAGE

_LEVEL_NAMES = frozenset(logging.getLevelNamesMapping())


@dataclasses.dataclass
class BrokerSettings(Settings):
    """Broker configuration read from ``MF_BROKER_*`` variables.

    ``MF_BROKER_ALLOWED_ORIGINS`` is a comma-separated list of origin prefixes.
    """

    _prefix: ClassVar[str] = "MF_BROKER"

    allowed_origins: list[str] = dataclasses.field(default_factory=list)
    event_name: str = EVENT_MESSAGE
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVEL_NAMES:
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        if not self.event_name:
            raise InvalidSettingValueError("event_name", self.event_name, "must not be empty")


__all__ = ["BrokerSettings"]
