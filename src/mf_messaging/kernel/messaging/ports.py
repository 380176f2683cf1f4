"""Kernel messaging – ports consumed by the broker."""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar

from mf_messaging.kernel.messaging.message import MessageBase

M_contra = TypeVar("M_contra", bound=MessageBase, contravariant=True)

#: Type alias for the callback an event source invokes on every delivery.
EventCallback = Callable[[Any], Awaitable[None]]


class MessageHandlerAsync(Protocol[M_contra]):
    """Application handler for one message variant."""

    def __call__(self, message: M_contra, /) -> Awaitable[None]: ...


class Subscription(Protocol):
    """Handle to a registered event callback."""

    def release(self) -> None:
        """Unregister the callback; the handle is dead afterwards."""
        ...


class EventSource(Protocol):
    """Port: something that delivers inbound events to a callback.

    Example::

        subscription = source.subscribe("message", broker.handle_event)
        ...
        subscription.release()
    """

    def subscribe(self, event_name: str, callback: EventCallback) -> Subscription: ...


class LogSink(Protocol):
    """Port: record notification text."""

    def log(self, text: str) -> None: ...


__all__ = ["EventCallback", "EventSource", "LogSink", "MessageHandlerAsync", "Subscription"]
