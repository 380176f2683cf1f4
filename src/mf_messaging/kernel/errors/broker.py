"""Broker errors — lifecycle, security and protocol failures."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mf_messaging.kernel.errors.application import ApplicationError


class BrokerError(ApplicationError):
    """Base class for failures reported by the messaging broker."""

    default_code = "broker_error"


class AlreadyDestroyedError(BrokerError):
    """Dispatch attempted on an object that has been torn down."""

    default_code = "already_destroyed"

    def __init__(self, message: str = "Object has been already destroyed!", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class OriginRejectedError(BrokerError):
    """Inbound event came from an origin outside the allowlist."""

    default_code = "origin_rejected"

    def __init__(self, origin: str, allowed_origins: Sequence[str], **kwargs: Any) -> None:
        allowed = tuple(allowed_origins)
        super().__init__(
            f"Received message from not allowed origin '{origin}'. "
            f"Allowed origins are: {', '.join(allowed)}",
            detail={"origin": origin, "allowed_origins": list(allowed)},
            **kwargs,
        )
        self.origin = origin
        self.allowed_origins = allowed


class UnknownMessageKindError(BrokerError):
    """Payload discriminant matches none of the known message kinds."""

    default_code = "unknown_message_kind"

    def __init__(self, kind: object, **kwargs: Any) -> None:
        super().__init__("Unknown message received", detail={"kind": kind}, **kwargs)
        self.kind = kind


__all__ = [
    "AlreadyDestroyedError",
    "BrokerError",
    "OriginRejectedError",
    "UnknownMessageKindError",
]
