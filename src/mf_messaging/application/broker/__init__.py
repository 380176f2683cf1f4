"""Application broker – origin guard, dispatch table and MessagingApiBroker."""
from mf_messaging.application.broker.broker import BrokerHandlers, MessagingApiBroker
from mf_messaging.application.broker.dispatch import DispatchTable, MessageRoute
from mf_messaging.application.broker.origins import OriginAllowlist

__all__ = ["BrokerHandlers", "DispatchTable", "MessageRoute", "MessagingApiBroker", "OriginAllowlist"]
