"""Session data model - immutable snapshots of clients, clusters and swipes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Self

ClientID = str
ClusterID = str


class Direction(str, Enum):
    """Cardinal direction of a swipe gesture."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Point:
    x: float = 0
    y: float = 0


@dataclass(frozen=True)
class Transform:
    """Offset of a client inside its cluster's coordinate frame."""

    x: float = 0
    y: float = 0

    def shifted(self, dx: float, dy: float) -> Transform:
        return Transform(x=self.x + dx, y=self.y + dy)


@dataclass(frozen=True)
class Segment:
    """Half-open stretch [start, end) along one edge, in client-local units."""

    start: float
    end: float

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Openings:
    """Free boundary segments on each edge of a client.

    Top and bottom segments run along x, left and right segments along y,
    both measured from the client's own top-left corner.
    """

    top: tuple[Segment, ...] = ()
    bottom: tuple[Segment, ...] = ()
    left: tuple[Segment, ...] = ()
    right: tuple[Segment, ...] = ()

    @classmethod
    def fully_open(cls, size: Size) -> Self:
        horizontal = (Segment(0, size.width),)
        vertical = (Segment(0, size.height),)
        return cls(top=horizontal, bottom=horizontal, left=vertical, right=vertical)


@dataclass(frozen=True)
class Client:
    """One screen taking part in the session."""

    id: ClientID
    size: Size
    transform: Transform = field(default_factory=Transform)
    adjacent_client_ids: frozenset[ClientID] = field(default_factory=frozenset)
    cluster_id: ClusterID | None = None
    openings: Openings = field(default_factory=Openings)
    data: Any = None

    def with_neighbor(self, client_id: ClientID) -> Self:
        return replace(self, adjacent_client_ids=self.adjacent_client_ids | {client_id})

    def without_neighbor(self, client_id: ClientID) -> Self:
        return replace(self, adjacent_client_ids=self.adjacent_client_ids - {client_id})


@dataclass(frozen=True)
class Cluster:
    id: ClusterID
    data: Any = None


@dataclass(frozen=True)
class Swipe:
    """A buffered swipe gesture awaiting its partner."""

    client_id: ClientID
    direction: Direction
    position: Point
    timestamp: float


@dataclass(frozen=True)
class State:
    """Complete session snapshot.

    Handlers never mutate a State; every transition builds new mappings and
    returns a new instance, so earlier snapshots stay valid.
    """

    clusters: Mapping[ClusterID, Cluster] = field(default_factory=dict)
    clients: Mapping[ClientID, Client] = field(default_factory=dict)
    swipes: tuple[Swipe, ...] = ()

    def with_clients(self, clients: Mapping[ClientID, Client]) -> Self:
        return replace(self, clients=clients)

    def with_clusters(self, clusters: Mapping[ClusterID, Cluster]) -> Self:
        return replace(self, clusters=clusters)

    def with_swipes(self, swipes: tuple[Swipe, ...]) -> Self:
        return replace(self, swipes=swipes)


def initial_state() -> State:
    return State()
