"""Observability – structlog-backed LogSink."""
from __future__ import annotations

from typing import Any

from mf_messaging.observability.logging.processors import get_logger


class StructlogLogSink:
    """:class:`~mf_messaging.kernel.messaging.LogSink` writing through structlog.

    The notification text becomes the log event; bound values are attached
    to every record.
    """

    def __init__(self, name: str = "mf_messaging.notifications", **initial_values: Any) -> None:
        self._logger = get_logger(name, **initial_values)

    def log(self, text: str) -> None:
        self._logger.info(text)


__all__ = ["StructlogLogSink"]
