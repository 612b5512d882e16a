from .kernel import (
    ActionOutcome,
    Client,
    ClientPolicy,
    ClientView,
    Cluster,
    ClusterPolicy,
    ClusterView,
    Direction,
    Event,
    InvalidDirection,
    InvalidEvent,
    Policy,
    Size,
    State,
    SwipetileError,
    Trace,
    Transform,
    UnhandledClientActionType,
    parse_event,
)
from .runtime import Store
from .session import ActionRegistry, Reducer, SessionConfig, create_reducer

__all__ = [
    # Core
    "State",
    "Client",
    "Cluster",
    "Direction",
    "Size",
    "Transform",
    "Event",
    "parse_event",
    # Policy
    "Policy",
    "ClientPolicy",
    "ClusterPolicy",
    "ActionOutcome",
    "ActionRegistry",
    "ClientView",
    "ClusterView",
    # Transition
    "Reducer",
    "SessionConfig",
    "create_reducer",
    "Store",
    # Errors
    "SwipetileError",
    "InvalidDirection",
    "InvalidEvent",
    "UnhandledClientActionType",
    # Tracing
    "Trace",
]
