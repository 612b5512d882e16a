"""Cluster merge: join two clusters along the edge two swipes agreed on."""

from __future__ import annotations

import logging
from dataclasses import replace

from swipetile.kernel.errors import InvalidDirection
from swipetile.kernel.model import Client, ClientID, Direction, State, Swipe, Transform
from swipetile.kernel.policy import Policy
from swipetile.kernel.views import cluster_view
from swipetile.session.openings import get_openings

logger = logging.getLogger(__name__)


def get_transform(client_a: Client, swipe_a: Swipe, client_b: Client, swipe_b: Swipe) -> Transform:
    """Where client B lands in A's frame, given the direction A swiped.

    The swipe positions line the two screens up along the shared edge.
    """
    a = client_a.transform
    direction = swipe_a.direction

    if direction == Direction.LEFT:
        return Transform(
            x=a.x - client_b.size.width,
            y=a.y + (swipe_a.position.y - swipe_b.position.y),
        )
    if direction == Direction.RIGHT:
        return Transform(
            x=a.x + client_a.size.width,
            y=a.y + (swipe_a.position.y - swipe_b.position.y),
        )
    if direction == Direction.UP:
        return Transform(
            x=a.x + (swipe_a.position.x - swipe_b.position.x),
            y=a.y - client_b.size.height,
        )
    if direction == Direction.DOWN:
        return Transform(
            x=a.x + (swipe_a.position.x - swipe_b.position.x),
            y=a.y + client_a.size.height,
        )
    raise InvalidDirection(direction)


def merge_clusters(
    state: State,
    client_a_id: ClientID,
    swipe_a: Swipe,
    client_b_id: ClientID,
    swipe_b: Swipe,
    policy: Policy,
) -> State:
    """Absorb B's cluster into A's.

    Every member of B's cluster moves into A's frame by the same offset
    that puts B flush against A. Only the A-B adjacency edge is added.
    Both clients must belong to (different) existing clusters.
    """
    client_a = state.clients[client_a_id]
    client_b = state.clients[client_b_id]
    survivor_id = client_a.cluster_id
    absorbed_id = client_b.cluster_id

    survivor = cluster_view(state, survivor_id)
    absorbed = cluster_view(state, absorbed_id)

    transform = get_transform(client_a, swipe_a, client_b, swipe_b)
    dx = transform.x - client_b.transform.x
    dy = transform.y - client_b.transform.y

    clients = dict(state.clients)
    for member in absorbed.clients:
        clients[member.id] = replace(
            member,
            cluster_id=survivor_id,
            transform=member.transform.shifted(dx, dy),
        )
    clients[client_b_id] = replace(clients[client_b_id], transform=transform).with_neighbor(client_a_id)
    clients[client_a_id] = clients[client_a_id].with_neighbor(client_b_id)

    for client_id in (client_a_id, client_b_id):
        clients[client_id] = replace(clients[client_id], openings=get_openings(clients, clients[client_id]))

    merged_data = policy.cluster.merge(survivor, absorbed, transform)
    clusters = {cluster_id: cluster for cluster_id, cluster in state.clusters.items() if cluster_id != absorbed_id}
    clusters[survivor_id] = replace(state.clusters[survivor_id], data=merged_data)

    logger.info(
        "Merged cluster %s into %s (%s %s of %s)",
        absorbed_id,
        survivor_id,
        client_b_id,
        swipe_a.direction.value,
        client_a_id,
    )
    return replace(state, clusters=clusters, clients=clients)
