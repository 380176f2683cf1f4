"""Kernel messaging – Messaging API payload variants.

Every variant is an immutable dataclass tagged with a :class:`MessageKind`.
Wire keys a variant does not model are kept in ``extra`` so that
:meth:`MessageBase.to_dict` reproduces the payload as it was received.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Self, TypeAlias

from mf_messaging.kernel.errors import UnknownMessageKindError
from mf_messaging.kernel.messaging.constants import DISCRIMINANT_KEY, MessageKind


@dataclasses.dataclass(frozen=True)
class MessageBase:
    """Base class of all Messaging API messages."""

    kind: ClassVar[MessageKind]

    extra: Mapping[str, Any] = dataclasses.field(default_factory=dict, kw_only=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form, ``{"message": <kind>, ...fields}``."""
        data: dict[str, Any] = {DISCRIMINANT_KEY: str(self.kind)}
        for field in dataclasses.fields(self):
            if field.name == "extra":
                continue
            value = getattr(self, field.name)
            if value is not None:
                data[field.name] = value
        for key, value in self.extra.items():
            data.setdefault(key, value)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build the variant from its wire form; unmodelled keys go to ``extra``."""
        names = {f.name for f in dataclasses.fields(cls)} - {"extra"}
        known = {k: v for k, v in data.items() if k in names}
        extra = {k: v for k, v in data.items() if k not in names and k != DISCRIMINANT_KEY}
        return cls(**known, extra=extra)


@dataclasses.dataclass(frozen=True)
class MessageRouted(MessageBase):
    """The embedded app navigated to a new route."""

    kind: ClassVar[MessageKind] = MessageKind.ROUTED

    url: str | None = None
    title: str | None = None


@dataclasses.dataclass(frozen=True)
class MessageSetFrameStyles(MessageBase):
    """The embedded app asks its host to restyle the hosting frame."""

    kind: ClassVar[MessageKind] = MessageKind.SET_FRAME_STYLES

    styles: Mapping[str, Any] | None = None


@dataclasses.dataclass(frozen=True)
class MessageGoto(MessageBase):
    """Request to navigate the receiving side to ``url``."""

    kind: ClassVar[MessageKind] = MessageKind.GOTO

    url: str | None = None


@dataclasses.dataclass(frozen=True)
class MessageBroadcast(MessageBase):
    """Application-defined broadcast relayed between frames."""

    kind: ClassVar[MessageKind] = MessageKind.BROADCAST

    topic: str | None = None
    payload: Any = None


@dataclasses.dataclass(frozen=True)
class MessageMetaRouted(MessageBase):
    """Sub-route change carrying route metadata."""

    kind: ClassVar[MessageKind] = MessageKind.META_ROUTED

    url: str | None = None
    meta: Mapping[str, Any] | None = None


@dataclasses.dataclass(frozen=True)
class MessageGetCustomFrameConfiguration(MessageBase):
    kind: ClassVar[MessageKind] = MessageKind.GET_CUSTOM_FRAME_CONFIG


@dataclasses.dataclass(frozen=True)
class MessageMicrofrontendLoaded(MessageBase):
    kind: ClassVar[MessageKind] = MessageKind.MICROFRONTEND_LOADED


@dataclasses.dataclass(frozen=True)
class MessageStateChanged(MessageBase):
    """The embedded app reports a change to its shareable state."""

    kind: ClassVar[MessageKind] = MessageKind.STATE_CHANGED

    state: Mapping[str, Any] | None = None


@dataclasses.dataclass(frozen=True)
class MessageStateDiscard(MessageBase):
    kind: ClassVar[MessageKind] = MessageKind.STATE_DISCARD


Message: TypeAlias = (
    MessageRouted
    | MessageSetFrameStyles
    | MessageGoto
    | MessageBroadcast
    | MessageMetaRouted
    | MessageGetCustomFrameConfiguration
    | MessageMicrofrontendLoaded
    | MessageStateChanged
    | MessageStateDiscard
)

MESSAGE_TYPES: Mapping[MessageKind, type[MessageBase]] = {
    cls.kind: cls
    for cls in (
        MessageRouted,
        MessageSetFrameStyles,
        MessageGoto,
        MessageBroadcast,
        MessageMetaRouted,
        MessageGetCustomFrameConfiguration,
        MessageMicrofrontendLoaded,
        MessageStateChanged,
        MessageStateDiscard,
    )
}


def message_kind_of(data: Mapping[str, Any] | MessageBase) -> MessageKind:
    """Return the :class:`MessageKind` of *data* or raise :class:`UnknownMessageKindError`."""
    if isinstance(data, MessageBase):
        return data.kind
    raw = data.get(DISCRIMINANT_KEY)
    try:
        return MessageKind(raw)
    except ValueError:
        raise UnknownMessageKindError(raw) from None


def message_from_dict(data: Mapping[str, Any]) -> MessageBase:
    """Narrow a wire mapping to its message variant."""
    return MESSAGE_TYPES[message_kind_of(data)].from_dict(data)


__all__ = [
    "MESSAGE_TYPES",
    "Message",
    "MessageBase",
    "MessageBroadcast",
    "MessageGetCustomFrameConfiguration",
    "MessageGoto",
    "MessageMetaRouted",
    "MessageMicrofrontendLoaded",
    "MessageRouted",
    "MessageSetFrameStyles",
    "MessageStateChanged",
    "MessageStateDiscard",
    "message_from_dict",
    "message_kind_of",
]
