"""Application broker – per-kind dispatch table."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from mf_messaging.kernel.messaging import (
    MESSAGE_TYPES,
    LogSink,
    MessageBase,
    MessageHandlerAsync,
    MessageKind,
    message_kind_of,
)

M = TypeVar("M", bound=MessageBase)


@dataclasses.dataclass(frozen=True)
class MessageRoute(Generic[M]):
    """Table entry: the variant a kind narrows to and its optional handler."""

    message_type: type[M]
    handler: MessageHandlerAsync[M] | None = None


class DispatchTable:
    """Route messages to their handlers by discriminant.

    Every known :class:`MessageKind` has a route. Notifying a known kind logs
    the payload once and then awaits the route's handler, if any; handler
    failures propagate untouched. Unknown kinds raise
    :class:`~mf_messaging.kernel.errors.UnknownMessageKindError` before
    anything is logged.
    """

    def __init__(
        self,
        log_sink: LogSink,
        handlers: Mapping[MessageKind, MessageHandlerAsync[Any] | None] | None = None,
    ) -> None:
        handlers = handlers or {}
        self._log_sink = log_sink
        self._routes: dict[MessageKind, MessageRoute[Any]] = {
            kind: MessageRoute(message_type, handlers.get(kind))
            for kind, message_type in MESSAGE_TYPES.items()
        }

    def route_for(self, kind: MessageKind) -> MessageRoute[Any]:
        return self._routes[kind]

    async def notify(self, message: Mapping[str, Any] | MessageBase) -> None:
        """Log and forward *message* to the handler registered for its kind."""
        route = self._routes[message_kind_of(message)]
        if isinstance(message, MessageBase):
            narrowed = message
            payload = message.to_dict()
        else:
            narrowed = route.message_type.from_dict(message)
            payload = dict(message)

        self._log_notification(narrowed.kind, payload)
        if route.handler is None:
            return
        await route.handler(narrowed)

    def _log_notification(self, kind: MessageKind, payload: Mapping[str, Any]) -> None:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)
        self._log_sink.log(f"'{kind}' message notification received: {text}")


__all__ = ["DispatchTable", "MessageRoute"]
