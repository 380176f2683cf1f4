"""Testing fakes – InMemoryEventSource."""
from __future__ import annotations

import dataclasses
from typing import Any

from mf_messaging.kernel.messaging import EventCallback, InboundEvent


@dataclasses.dataclass(eq=False)
class InMemorySubscription:
    """Subscription handle that counts its releases."""

    source: InMemoryEventSource
    event_name: str
    callback: EventCallback
    release_count: int = 0

    @property
    def released(self) -> bool:
        return self.release_count > 0

    def release(self) -> None:
        self.release_count += 1
        self.source._detach(self)


class InMemoryEventSource:
    """In-memory event source for tests.

    :meth:`deliver` awaits every live callback subscribed to the event name,
    so failures raised by a subscriber surface in the test.
    """

    def __init__(self) -> None:
        self._subscriptions: list[InMemorySubscription] = []
        self.history: list[InMemorySubscription] = []

    def subscribe(self, event_name: str, callback: EventCallback) -> InMemorySubscription:
        subscription = InMemorySubscription(self, event_name, callback)
        self._subscriptions.append(subscription)
        self.history.append(subscription)
        return subscription

    @property
    def subscriptions(self) -> list[InMemorySubscription]:
        return list(self._subscriptions)

    def listener_count(self, event_name: str) -> int:
        return sum(1 for s in self._subscriptions if s.event_name == event_name)

    async def deliver(self, event: Any, event_name: str = "message") -> None:
        for subscription in list(self._subscriptions):
            if subscription.event_name == event_name:
                await subscription.callback(event)

    async def post(self, origin: str, data: Any = None, event_name: str = "message") -> None:
        """Shortcut for ``deliver(InboundEvent(origin, data))``."""
        await self.deliver(InboundEvent(origin=origin, data=data), event_name)

    def _detach(self, subscription: InMemorySubscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)


__all__ = ["InMemoryEventSource", "InMemorySubscription"]
