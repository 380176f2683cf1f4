"""Application layer – the Messaging API broker."""
from mf_messaging.application.broker import (
    BrokerHandlers,
    DispatchTable,
    MessageRoute,
    MessagingApiBroker,
    OriginAllowlist,
)

__all__ = ["BrokerHandlers", "DispatchTable", "MessageRoute", "MessagingApiBroker", "OriginAllowlist"]
