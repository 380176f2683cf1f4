"""Kernel messaging – event name and message discriminants."""
from __future__ import annotations

from enum import StrEnum

#: Name of the transport event the broker subscribes to.
EVENT_MESSAGE = "message"

#: Wire key holding the discriminant of a message payload.
DISCRIMINANT_KEY = "message"


class MessageKind(StrEnum):
    """Closed set of Messaging API message discriminants."""

    ROUTED = "MESSAGE_ROUTED"
    SET_FRAME_STYLES = "MESSAGE_SET_FRAME_STYLES"
    GOTO = "MESSAGE_GOTO"
    BROADCAST = "MESSAGE_BROADCAST"
    META_ROUTED = "MESSAGE_META_ROUTED"
    GET_CUSTOM_FRAME_CONFIG = "MESSAGE_GET_CUSTOM_FRAME_CONFIG"
    MICROFRONTEND_LOADED = "MESSAGE_MICROFRONTEND_LOADED"
    STATE_CHANGED = "MESSAGE_STATE_CHANGED"
    STATE_DISCARD = "MESSAGE_STATE_DISCARD"


__all__ = ["DISCRIMINANT_KEY", "EVENT_MESSAGE", "MessageKind"]
