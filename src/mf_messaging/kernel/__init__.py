"""Kernel – framework-agnostic building blocks."""

from mf_messaging.kernel.errors import (
    AlreadyDestroyedError,
    ApplicationError,
    BaseError,
    BrokerError,
    OriginRejectedError,
    UnknownMessageKindError,
)

__all__ = [
    "AlreadyDestroyedError",
    "ApplicationError",
    "BaseError",
    "BrokerError",
    "OriginRejectedError",
    "UnknownMessageKindError",
]
