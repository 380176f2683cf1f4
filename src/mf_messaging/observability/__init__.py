"""Observability – logging."""
from mf_messaging.observability.logging import (
    JsonLoggerFactory,
    StructlogLogSink,
    configure_logging,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "StructlogLogSink", "configure_logging", "get_logger"]
