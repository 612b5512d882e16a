from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from swipetile.kernel import (
    ClientPolicy,
    ClusterPolicy,
    ConnectEvent,
    Point,
    Policy,
    Size,
    SwipeEvent,
)
from swipetile.session import Reducer, SessionConfig


@dataclass
class FakeClock:
    now: float = 1_000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@dataclass
class SequentialIds:
    prefix: str = "cluster"
    issued: int = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"{self.prefix}-{self.issued}"


@dataclass
class RecordingHooks:
    """Policy hooks that keep payloads simple and remember every call."""

    merges: list[tuple[Any, Any, Any]] = field(default_factory=list)

    def client_init(self, client) -> dict[str, Any]:
        return {"id": client.id, "ticks": 0}

    def cluster_init(self, client) -> dict[str, Any]:
        return {"members": (client.id,)}

    def merge(self, survivor, absorbed, transform) -> dict[str, Any]:
        self.merges.append((survivor, absorbed, transform))
        return {"members": survivor.data["members"] + absorbed.data["members"]}


def make_policy(
    hooks: RecordingHooks | None = None,
    client_update=None,
    cluster_update=None,
    actions=None,
) -> Policy:
    hooks = hooks or RecordingHooks()
    return Policy(
        client=ClientPolicy(init=hooks.client_init, update=client_update, actions=actions if actions is not None else {}),
        cluster=ClusterPolicy(init=hooks.cluster_init, merge=hooks.merge, update=cluster_update),
    )


def make_reducer(policy: Policy | None = None, clock: FakeClock | None = None) -> Reducer:
    config = SessionConfig(clock=clock or FakeClock(), new_cluster_id=SequentialIds())
    return Reducer(policy or make_policy(), config)


def connect(client_id: str, width: float = 100, height: float = 200) -> ConnectEvent:
    return ConnectEvent(id=client_id, size=Size(width, height))


def swipe(client_id: str, direction: str, x: float = 0, y: float = 0) -> SwipeEvent:
    return SwipeEvent(id=client_id, direction=direction, position=Point(x, y))


def assert_invariants(state) -> None:
    """Referential integrity and symmetric adjacency."""
    for client in state.clients.values():
        if client.cluster_id is not None:
            assert client.cluster_id in state.clusters
        for other_id in client.adjacent_client_ids:
            assert other_id in state.clients
            assert client.id in state.clients[other_id].adjacent_client_ids
    for cluster_id in state.clusters:
        assert any(c.cluster_id == cluster_id for c in state.clients.values())
