"""Kernel messaging – inbound transport event."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from mf_messaging.kernel.messaging.message import MessageBase


@dataclasses.dataclass(frozen=True)
class InboundEvent:
    """One delivery from the event source: sender origin plus payload.

    ``data`` is whatever the transport deserialised. Traffic that is not a
    Messaging API message may share the channel, so ``data`` can be ``None``
    or a mapping without a discriminant.
    """

    origin: str
    data: Mapping[str, Any] | MessageBase | None = None


__all__ = ["InboundEvent"]
