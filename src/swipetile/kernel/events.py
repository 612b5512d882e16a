"""Session events - the closed set of inputs to the transition function."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from swipetile.kernel.errors import InvalidEvent
from swipetile.kernel.model import Point, Size


class EventType(str, Enum):
    NEXT_STATE = "NEXT_STATE"
    CLIENT_ACTION = "CLIENT_ACTION"
    CONNECT = "CONNECT"
    SWIPE = "SWIPE"
    LEAVE_CLUSTER = "LEAVE_CLUSTER"
    DISCONNECT = "DISCONNECT"


class BaseEvent(BaseModel):
    """Common base for event payloads."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ClassVar[EventType]

    def envelope(self) -> dict[str, Any]:
        """Wire form: ``{"type": ..., "data": ...}``."""
        return {"type": self.kind.value, "data": self.model_dump(by_alias=True)}


class NextStateEvent(BaseEvent):
    """Tick: run the update hooks over every client and cluster."""

    kind: ClassVar[EventType] = EventType.NEXT_STATE


class ClientActionEvent(BaseEvent):
    kind: ClassVar[EventType] = EventType.CLIENT_ACTION

    id: str
    action_type: str = Field(alias="type")
    data: Any = None


class ConnectEvent(BaseEvent):
    kind: ClassVar[EventType] = EventType.CONNECT

    id: str
    size: Size


class SwipeEvent(BaseEvent):
    # Direction stays a plain string here; the swipe handler rejects
    # unknown values with InvalidDirection.
    kind: ClassVar[EventType] = EventType.SWIPE

    id: str
    direction: str
    position: Point


class LeaveClusterEvent(BaseEvent):
    kind: ClassVar[EventType] = EventType.LEAVE_CLUSTER

    id: str


class DisconnectEvent(BaseEvent):
    kind: ClassVar[EventType] = EventType.DISCONNECT

    id: str


Event = (
    NextStateEvent
    | ClientActionEvent
    | ConnectEvent
    | SwipeEvent
    | LeaveClusterEvent
    | DisconnectEvent
)

EVENT_MODELS: dict[EventType, type[BaseEvent]] = {
    model.kind: model
    for model in (
        NextStateEvent,
        ClientActionEvent,
        ConnectEvent,
        SwipeEvent,
        LeaveClusterEvent,
        DisconnectEvent,
    )
}


class Envelope(BaseModel):
    """Raw event as delivered by the transport."""

    type: str
    data: dict[str, Any] | None = None


def parse_event(envelope: Envelope | Mapping[str, Any]) -> Event | None:
    """Turn a ``{type, data}`` envelope into a typed event.

    Returns None for an unknown type. Raises InvalidEvent when the type is
    known but the payload does not validate.
    """
    if not isinstance(envelope, Envelope):
        try:
            envelope = Envelope.model_validate(envelope)
        except ValidationError as exc:
            raise InvalidEvent("<envelope>", exc) from exc

    try:
        event_type = EventType(envelope.type)
    except ValueError:
        return None

    model = EVENT_MODELS[event_type]
    try:
        return model.model_validate(envelope.data or {})
    except ValidationError as exc:
        raise InvalidEvent(event_type.value, exc) from exc
