"""Tick: apply the host's update hooks to every payload."""

from __future__ import annotations

from dataclasses import replace

from swipetile.kernel.model import State
from swipetile.kernel.policy import Policy
from swipetile.kernel.views import client_view, cluster_view


def next_state(state: State, policy: Policy) -> State:
    """Run ``cluster.update`` and ``client.update`` over every entity.

    Each hook sees the snapshot from before the tick, so entities are
    updated independently of one another. A missing hook leaves its
    collection untouched.
    """
    update_cluster = policy.cluster.update
    update_client = policy.client.update
    changes = {}

    if update_cluster is not None:
        changes["clusters"] = {
            cluster_id: replace(cluster, data=update_cluster(cluster_view(state, cluster_id)))
            for cluster_id, cluster in state.clusters.items()
        }

    if update_client is not None:
        changes["clients"] = {
            client_id: replace(client, data=update_client(client_view(state, client_id)))
            for client_id, client in state.clients.items()
        }

    return replace(state, **changes)
