"""
mf_messaging – Messaging API broker for embedded frames.

Import path convention::

    from mf_messaging.application.broker import MessagingApiBroker
    from mf_messaging.kernel.messaging import MessageGoto, MessageKind
    from mf_messaging.kernel.errors import OriginRejectedError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
