"""Leaving a cluster and disconnecting from the session."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from swipetile.kernel.events import DisconnectEvent, LeaveClusterEvent
from swipetile.kernel.model import Client, ClientID, Cluster, ClusterID, Openings, State, Transform
from swipetile.kernel.views import clients_in_cluster
from swipetile.session.openings import get_openings

logger = logging.getLogger(__name__)


def collapse_cluster(
    clusters: Mapping[ClusterID, Cluster],
    clients: Mapping[ClientID, Client],
    cluster_id: ClusterID | None,
) -> tuple[dict[ClusterID, Cluster], dict[ClientID, Client]]:
    """Delete ``cluster_id`` unless more than one client still belongs to it.

    ``clients`` must already reflect the removal. A lone survivor is
    detached (its ``cluster_id`` becomes None) so no client points at a
    deleted cluster.
    """
    clusters = dict(clusters)
    clients = dict(clients)
    if cluster_id is None or cluster_id not in clusters:
        return clusters, clients

    members = clients_in_cluster(clients, cluster_id)
    if len(members) > 1:
        return clusters, clients

    del clusters[cluster_id]
    for member in members:
        clients[member.id] = replace(member, cluster_id=None)
    logger.info("Collapsed cluster %s (%d member(s) left)", cluster_id, len(members))
    return clusters, clients


def purge_neighbor(clients: Mapping[ClientID, Client], removed_id: ClientID) -> dict[ClientID, Client]:
    """Drop ``removed_id`` from every adjacency set and refresh openings."""
    purged = {
        client_id: client.without_neighbor(removed_id) if removed_id in client.adjacent_client_ids else client
        for client_id, client in clients.items()
    }
    return {
        client_id: replace(client, openings=get_openings(purged, client))
        if removed_id in clients[client_id].adjacent_client_ids
        else client
        for client_id, client in purged.items()
    }


def leave_cluster(state: State, event: LeaveClusterEvent) -> State:
    client = state.clients.get(event.id)
    if client is None:
        logger.debug("LEAVE_CLUSTER for unknown client %s ignored", event.id)
        return state
    if client.cluster_id is None:
        return state

    detached = replace(
        client,
        cluster_id=None,
        transform=Transform(),
        adjacent_client_ids=frozenset(),
        openings=Openings.fully_open(client.size),
    )
    clients = purge_neighbor(state.clients, client.id)
    clients[client.id] = detached

    clusters, clients = collapse_cluster(state.clusters, clients, client.cluster_id)
    logger.debug("Client %s left cluster %s", client.id, client.cluster_id)
    return replace(state, clusters=clusters, clients=clients)


def disconnect(state: State, event: DisconnectEvent) -> State:
    client = state.clients.get(event.id)
    if client is None:
        logger.debug("DISCONNECT for unknown client %s ignored", event.id)
        return state

    remaining = {client_id: other for client_id, other in state.clients.items() if client_id != client.id}
    clients = purge_neighbor(remaining, client.id)
    clusters, clients = collapse_cluster(state.clusters, clients, client.cluster_id)
    swipes = tuple(swipe for swipe in state.swipes if swipe.client_id != client.id)

    logger.debug("Client %s disconnected", client.id)
    return State(clusters=clusters, clients=clients, swipes=swipes)
