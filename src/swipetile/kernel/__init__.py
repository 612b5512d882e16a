"""Kernel layer - pure data and abstractions for swipetile."""

from swipetile.kernel.errors import (
    InvalidDirection,
    InvalidEvent,
    SwipetileError,
    UnhandledClientActionType,
)
from swipetile.kernel.events import (
    ClientActionEvent,
    ConnectEvent,
    DisconnectEvent,
    Envelope,
    Event,
    EventType,
    LeaveClusterEvent,
    NextStateEvent,
    SwipeEvent,
    parse_event,
)
from swipetile.kernel.model import (
    Client,
    Cluster,
    Direction,
    Openings,
    Point,
    Segment,
    Size,
    State,
    Swipe,
    Transform,
    initial_state,
)
from swipetile.kernel.policy import ActionOutcome, ClientPolicy, ClusterPolicy, Policy
from swipetile.kernel.ports import Clock, IdFactory, random_id, system_clock
from swipetile.kernel.trace import Evidence, Trace
from swipetile.kernel.views import ClientView, ClusterView, client_view, cluster_view

__all__ = [
    # Model
    "Client",
    "Cluster",
    "Direction",
    "Openings",
    "Point",
    "Segment",
    "Size",
    "State",
    "Swipe",
    "Transform",
    "initial_state",
    # Events
    "Event",
    "EventType",
    "Envelope",
    "NextStateEvent",
    "ClientActionEvent",
    "ConnectEvent",
    "SwipeEvent",
    "LeaveClusterEvent",
    "DisconnectEvent",
    "parse_event",
    # Errors
    "SwipetileError",
    "InvalidDirection",
    "InvalidEvent",
    "UnhandledClientActionType",
    # Policy & views
    "ActionOutcome",
    "ClientPolicy",
    "ClusterPolicy",
    "Policy",
    "ClientView",
    "ClusterView",
    "client_view",
    "cluster_view",
    # Ports
    "Clock",
    "IdFactory",
    "random_id",
    "system_clock",
    # Tracing
    "Evidence",
    "Trace",
]
