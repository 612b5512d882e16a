"""Host-supplied policy hooks.

The core never looks inside client or cluster payloads. Everything it
knows about them goes through the hooks gathered here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from swipetile.kernel.model import Client, Transform
from swipetile.kernel.views import ClientView, ClusterView


class InitHook(Protocol):
    """Builds the initial payload for a freshly connected client."""

    def __call__(self, client: Client) -> Any:
        ...


class ClientUpdateHook(Protocol):
    def __call__(self, client: ClientView) -> Any:
        ...


class ClusterUpdateHook(Protocol):
    def __call__(self, cluster: ClusterView) -> Any:
        ...


class MergeHook(Protocol):
    """Combines two cluster payloads.

    ``transform`` is the new offset of the joining client inside the
    surviving cluster.
    """

    def __call__(self, survivor: ClusterView, absorbed: ClusterView, transform: Transform) -> Any:
        ...


@dataclass(frozen=True)
class ActionOutcome:
    """Partial updates produced by a client action handler.

    Each mapping holds field updates shallow-merged into the record,
    e.g. ``{"data": new_payload}``.
    """

    cluster: Mapping[str, Any] | None = None
    client: Mapping[str, Any] | None = None


class ActionHandler(Protocol):
    def __call__(self, client: ClientView, data: Any) -> ActionOutcome | Mapping[str, Any] | None:
        ...


@dataclass(frozen=True)
class ClientPolicy:
    init: InitHook
    update: ClientUpdateHook | None = None
    actions: Mapping[str, ActionHandler] = field(default_factory=dict)


@dataclass(frozen=True)
class ClusterPolicy:
    init: InitHook
    merge: MergeHook
    update: ClusterUpdateHook | None = None


@dataclass(frozen=True)
class Policy:
    """Strategy object bound to a reducer at construction."""

    client: ClientPolicy
    cluster: ClusterPolicy
