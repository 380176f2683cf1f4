"""Observability – structured logging helpers."""
from mf_messaging.observability.logging.factory import JsonLoggerFactory, configure_logging
from mf_messaging.observability.logging.processors import get_logger
from mf_messaging.observability.logging.sink import StructlogLogSink

__all__ = ["JsonLoggerFactory", "StructlogLogSink", "configure_logging", "get_logger"]
