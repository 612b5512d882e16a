"""Swipe pairing: match two coincident swipes and merge their clusters.

Only the earliest pending swipe is ever paired. A third swipe arriving in
the same window starts over with an empty buffer.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from swipetile.kernel.errors import InvalidDirection
from swipetile.kernel.events import SwipeEvent
from swipetile.kernel.model import ClientID, Direction, State, Swipe
from swipetile.kernel.policy import Policy
from swipetile.kernel.ports import IdFactory
from swipetile.session.config import SessionConfig
from swipetile.session.connection import singleton_cluster
from swipetile.session.merge import merge_clusters

logger = logging.getLogger(__name__)


def parse_direction(value: Any) -> Direction:
    try:
        return Direction(value)
    except ValueError:
        raise InvalidDirection(value) from None


def coincident_swipes(swipes: tuple[Swipe, ...], now: float, window_ms: float) -> tuple[Swipe, ...]:
    """Pending swipes still inside the coincidence window."""
    return tuple(swipe for swipe in swipes if now - swipe.timestamp < window_ms)


def _ensure_cluster(state: State, client_id: ClientID, policy: Policy, new_cluster_id: IdFactory) -> State:
    client = state.clients[client_id]
    if client.cluster_id is not None:
        return state
    client, cluster = singleton_cluster(client, policy, new_cluster_id)
    return replace(
        state,
        clusters={**state.clusters, cluster.id: cluster},
        clients={**state.clients, client.id: client},
    )


def swipe(state: State, event: SwipeEvent, policy: Policy, config: SessionConfig) -> State:
    direction = parse_direction(event.direction)

    if event.id not in state.clients:
        logger.debug("SWIPE from unknown client %s ignored", event.id)
        return state

    now = config.clock()
    pending = coincident_swipes(state.swipes, now, config.coincidence_window_ms)
    incoming = Swipe(client_id=event.id, direction=direction, position=event.position, timestamp=now)

    if not pending:
        logger.debug("Buffered %s swipe from %s", direction.value, event.id)
        return state.with_swipes(pending + (incoming,))

    partner = pending[0]
    client_a = state.clients[partner.client_id]
    client_b = state.clients[event.id]

    if client_a.id == client_b.id or (
        client_a.cluster_id is not None and client_a.cluster_id == client_b.cluster_id
    ):
        logger.debug("Swipes from %s and %s already share a cluster", client_a.id, client_b.id)
        return state.with_swipes(())

    state = _ensure_cluster(state, client_a.id, policy, config.new_cluster_id)
    state = _ensure_cluster(state, client_b.id, policy, config.new_cluster_id)
    state = merge_clusters(state, client_a.id, partner, client_b.id, incoming, policy)
    return state.with_swipes(())
