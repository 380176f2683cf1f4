"""Application broker – MessagingApiBroker.

Message broker translating Messaging API events between a host page and the
frames it embeds (or vice versa) into calls on application handlers.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypedDict, Unpack

from mf_messaging.application.broker.dispatch import DispatchTable
from mf_messaging.application.broker.origins import OriginAllowlist
from mf_messaging.config.settings import BrokerSettings
from mf_messaging.kernel.errors import OriginRejectedError
from mf_messaging.kernel.lifecycle import Destroyable
from mf_messaging.kernel.messaging import (
    DISCRIMINANT_KEY,
    EVENT_MESSAGE,
    EventSource,
    InboundEvent,
    LogSink,
    MessageBase,
    MessageBroadcast,
    MessageGetCustomFrameConfiguration,
    MessageGoto,
    MessageHandlerAsync,
    MessageKind,
    MessageMetaRouted,
    MessageMicrofrontendLoaded,
    MessageRouted,
    MessageSetFrameStyles,
    MessageStateChanged,
    MessageStateDiscard,
)
from mf_messaging.observability.logging import StructlogLogSink, configure_logging, get_logger

_log = get_logger(__name__)


class BrokerHandlers(TypedDict, total=False):
    """Optional per-variant handlers accepted by :meth:`MessagingApiBroker.from_settings`."""

    handle_routed: MessageHandlerAsync[MessageRouted] | None
    handle_set_frame_styles: MessageHandlerAsync[MessageSetFrameStyles] | None
    handle_goto: MessageHandlerAsync[MessageGoto] | None
    handle_broadcast: MessageHandlerAsync[MessageBroadcast] | None
    handle_subroute: MessageHandlerAsync[MessageMetaRouted] | None
    handle_get_frame_config: MessageHandlerAsync[MessageGetCustomFrameConfiguration] | None
    handle_microfrontend_loaded: MessageHandlerAsync[MessageMicrofrontendLoaded] | None
    handle_state_changed: MessageHandlerAsync[MessageStateChanged] | None
    handle_state_discard: MessageHandlerAsync[MessageStateDiscard] | None


class MessagingApiBroker(Destroyable):
    """Validate, discriminate and dispatch inbound Messaging API events.

    The broker subscribes :meth:`handle_event` to *event_source* on
    construction and releases that subscription on :meth:`destroy`.

    Example::

        broker = MessagingApiBroker(
            source,
            StructlogLogSink(),
            ["https://host.example"],
            handle_goto=navigate,
        )
        ...
        broker.destroy()
    """

    def __init__(
        self,
        event_source: EventSource,
        log_sink: LogSink,
        allowed_origins: Iterable[str],
        *,
        handle_routed: MessageHandlerAsync[MessageRouted] | None = None,
        handle_set_frame_styles: MessageHandlerAsync[MessageSetFrameStyles] | None = None,
        handle_goto: MessageHandlerAsync[MessageGoto] | None = None,
        handle_broadcast: MessageHandlerAsync[MessageBroadcast] | None = None,
        handle_subroute: MessageHandlerAsync[MessageMetaRouted] | None = None,
        handle_get_frame_config: MessageHandlerAsync[MessageGetCustomFrameConfiguration] | None = None,
        handle_microfrontend_loaded: MessageHandlerAsync[MessageMicrofrontendLoaded] | None = None,
        handle_state_changed: MessageHandlerAsync[MessageStateChanged] | None = None,
        handle_state_discard: MessageHandlerAsync[MessageStateDiscard] | None = None,
        event_name: str = EVENT_MESSAGE,
    ) -> None:
        super().__init__()
        self._allowed_origins = OriginAllowlist(allowed_origins)
        self._dispatch = DispatchTable(
            log_sink,
            {
                MessageKind.ROUTED: handle_routed,
                MessageKind.SET_FRAME_STYLES: handle_set_frame_styles,
                MessageKind.GOTO: handle_goto,
                MessageKind.BROADCAST: handle_broadcast,
                MessageKind.META_ROUTED: handle_subroute,
                MessageKind.GET_CUSTOM_FRAME_CONFIG: handle_get_frame_config,
                MessageKind.MICROFRONTEND_LOADED: handle_microfrontend_loaded,
                MessageKind.STATE_CHANGED: handle_state_changed,
                MessageKind.STATE_DISCARD: handle_state_discard,
            },
        )
        self._event_name = event_name
        self._subscription = event_source.subscribe(event_name, self.handle_event)
        _log.debug(
            "broker.subscribed",
            event_name=event_name,
            allowed_origins=list(self._allowed_origins),
        )

    @classmethod
    def from_settings(
        cls,
        settings: BrokerSettings,
        event_source: EventSource,
        log_sink: LogSink | None = None,
        *,
        configure_logs: bool = True,
        **handlers: Unpack[BrokerHandlers],
    ) -> MessagingApiBroker:
        """Build a broker from :class:`BrokerSettings`.

        Unless ``configure_logs`` is false, logging is first configured from
        ``settings.log_level`` and ``settings.log_json``. ``log_sink`` defaults
        to a :class:`StructlogLogSink`; ``handlers`` are the ``handle_*``
        keyword arguments of the constructor.
        """
        if configure_logs:
            configure_logging(settings.log_level, json=settings.log_json)
        return cls(
            event_source,
            log_sink if log_sink is not None else StructlogLogSink(),
            settings.allowed_origins,
            event_name=settings.event_name,
            **handlers,
        )

    @property
    def allowed_origins(self) -> tuple[str, ...]:
        return self._allowed_origins.origins

    @property
    def event_name(self) -> str:
        return self._event_name

    def is_allowed(self, origin: str) -> bool:
        """Verify whether *origin* is allowed to send messages."""
        return self._allowed_origins.is_allowed(origin)

    async def handle_event(self, event: InboundEvent) -> None:
        """Handle one inbound event delivered by the event source.

        Raises :class:`AlreadyDestroyedError` after teardown and
        :class:`OriginRejectedError` for origins outside the allowlist.
        Events without a Messaging API payload are ignored.
        """
        self.ensure_active()

        data = event.data
        if not _carries_message(data):
            return

        if not self.is_allowed(event.origin):
            raise OriginRejectedError(event.origin, self._allowed_origins.origins)

        await self.notify(data)

    async def notify(self, message: Mapping[str, Any] | MessageBase) -> None:
        """Notify the handler registered for *message*'s kind."""
        await self._dispatch.notify(message)

    def _on_destroy(self) -> None:
        self._subscription.release()
        _log.debug("broker.destroyed", event_name=self._event_name)


def _carries_message(data: object) -> bool:
    if isinstance(data, MessageBase):
        return True
    return isinstance(data, Mapping) and bool(data.get(DISCRIMINANT_KEY))


__all__ = ["MessagingApiBroker"]
