from __future__ import annotations

from swipetile.kernel import NextStateEvent

from fakes import FakeClock, connect, make_policy, make_reducer, swipe


def bump(view):
    return {**view.data, "ticks": view.data["ticks"] + 1}


def build(policy):
    clock = FakeClock()
    reduce = make_reducer(policy, clock=clock)
    state = None
    for client_id in ("a", "b", "c"):
        state = reduce(state, connect(client_id))
    state = reduce(state, swipe("a", "RIGHT"))
    state = reduce(state, swipe("b", "LEFT"))
    return reduce, state


def test_client_update_only():
    reduce, state = build(make_policy(client_update=bump))
    after = reduce(state, NextStateEvent())

    assert after.clusters is state.clusters
    for client_id, client in after.clients.items():
        assert client.data == {"id": client_id, "ticks": 1}
        assert client.transform == state.clients[client_id].transform
    assert state.clients["a"].data["ticks"] == 0


def test_cluster_update_sees_members():
    def count_members(view):
        return {**view.data, "size": len(view.clients)}

    reduce, state = build(make_policy(cluster_update=count_members))
    after = reduce(state, NextStateEvent())

    assert after.clients is state.clients
    assert after.clusters["cluster-1"].data["size"] == 2
    assert after.clusters["cluster-3"].data["size"] == 1


def test_client_update_sees_cluster():
    seen = {}

    def record(view):
        seen[view.id] = view.cluster.id if view.cluster else None
        return view.data

    reduce, state = build(make_policy(client_update=record))
    reduce(state, NextStateEvent())
    assert seen == {"a": "cluster-1", "b": "cluster-1", "c": "cluster-3"}


def test_no_update_hooks_is_identity():
    reduce, state = build(make_policy())
    after = reduce(state, NextStateEvent())
    assert after == state
    assert after.clients is state.clients
    assert after.clusters is state.clusters
