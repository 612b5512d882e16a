"""Client connection: a new screen joins as its own singleton cluster."""

from __future__ import annotations

import logging
from dataclasses import replace

from swipetile.kernel.events import ConnectEvent, DisconnectEvent
from swipetile.kernel.model import Client, Cluster, Openings, State, Transform
from swipetile.kernel.policy import Policy
from swipetile.kernel.ports import IdFactory
from swipetile.session.departure import disconnect

logger = logging.getLogger(__name__)


def singleton_cluster(client: Client, policy: Policy, new_cluster_id: IdFactory) -> tuple[Client, Cluster]:
    """Place ``client`` alone at the origin of a brand new cluster."""
    cluster_id = new_cluster_id()
    placed = replace(
        client,
        cluster_id=cluster_id,
        transform=Transform(),
        adjacent_client_ids=frozenset(),
        openings=Openings.fully_open(client.size),
    )
    cluster = Cluster(id=cluster_id, data=policy.cluster.init(placed))
    logger.info("Created cluster %s for client %s", cluster_id, client.id)
    return placed, cluster


def connect(state: State, event: ConnectEvent, policy: Policy, new_cluster_id: IdFactory) -> State:
    if event.id in state.clients:
        # Last write wins: the old record goes away exactly as on disconnect.
        logger.warning("Client %s connected again; replacing previous record", event.id)
        state = disconnect(state, DisconnectEvent(id=event.id))

    client, cluster = singleton_cluster(Client(id=event.id, size=event.size), policy, new_cluster_id)
    client = replace(client, data=policy.client.init(client))

    return replace(
        state,
        clusters={**state.clusters, cluster.id: cluster},
        clients={**state.clients, client.id: client},
    )
