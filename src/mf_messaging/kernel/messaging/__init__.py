"""Kernel messaging – Messaging API messages, inbound events and ports."""
from mf_messaging.kernel.messaging.constants import DISCRIMINANT_KEY, EVENT_MESSAGE, MessageKind
from mf_messaging.kernel.messaging.event import InboundEvent
from mf_messaging.kernel.messaging.message import (
    MESSAGE_TYPES,
    Message,
    MessageBase,
    MessageBroadcast,
    MessageGetCustomFrameConfiguration,
    MessageGoto,
    MessageMetaRouted,
    MessageMicrofrontendLoaded,
    MessageRouted,
    MessageSetFrameStyles,
    MessageStateChanged,
    MessageStateDiscard,
    message_from_dict,
    message_kind_of,
)
from mf_messaging.kernel.messaging.ports import (
    EventCallback,
    EventSource,
    LogSink,
    MessageHandlerAsync,
    Subscription,
)

__all__ = [
    "DISCRIMINANT_KEY",
    "EVENT_MESSAGE",
    "EventCallback",
    "EventSource",
    "InboundEvent",
    "LogSink",
    "MESSAGE_TYPES",
    "Message",
    "MessageBase",
    "MessageBroadcast",
    "MessageGetCustomFrameConfiguration",
    "MessageGoto",
    "MessageHandlerAsync",
    "MessageKind",
    "MessageMetaRouted",
    "MessageMicrofrontendLoaded",
    "MessageRouted",
    "MessageSetFrameStyles",
    "MessageStateChanged",
    "MessageStateDiscard",
    "Subscription",
    "message_from_dict",
    "message_kind_of",
]
