"""Read-only projections of a snapshot handed to policy hooks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from swipetile.kernel.model import Client, ClientID, ClusterID, State


@dataclass(frozen=True)
class ClusterView:
    """A cluster together with its member clients."""

    id: ClusterID
    data: Any
    clients: tuple[Client, ...]


@dataclass(frozen=True)
class ClientView:
    """A client together with the cluster it belongs to, if any."""

    client: Client
    cluster: ClusterView | None

    @property
    def id(self) -> ClientID:
        return self.client.id

    @property
    def data(self) -> Any:
        return self.client.data


def clients_in_cluster(clients: Mapping[ClientID, Client], cluster_id: ClusterID | None) -> list[Client]:
    if cluster_id is None:
        return []
    return [client for client in clients.values() if client.cluster_id == cluster_id]


def cluster_view(state: State, cluster_id: ClusterID) -> ClusterView:
    cluster = state.clusters[cluster_id]
    members = tuple(clients_in_cluster(state.clients, cluster_id))
    return ClusterView(id=cluster.id, data=cluster.data, clients=members)


def client_view(state: State, client_id: ClientID) -> ClientView:
    client = state.clients[client_id]
    cluster = None
    if client.cluster_id is not None and client.cluster_id in state.clusters:
        cluster = cluster_view(state, client.cluster_id)
    return ClientView(client=client, cluster=cluster)
