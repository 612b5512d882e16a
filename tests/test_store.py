from __future__ import annotations

import pytest

from swipetile import Store, Trace
from swipetile.kernel import InvalidDirection, State

from fakes import FakeClock, connect, make_policy, make_reducer, swipe


def bump(view):
    return {**view.data, "ticks": view.data["ticks"] + 1}


@pytest.fixture
def store():
    return Store(make_reducer(make_policy(client_update=bump), clock=FakeClock()), trace=Trace())


def test_starts_empty(store):
    assert store.state == State()


def test_dispatch_advances_state(store):
    state = store.dispatch(connect("a"))
    assert store.state is state
    assert "a" in state.clients

    store.dispatch({"type": "CONNECT", "data": {"id": "b", "size": {"width": 10, "height": 10}}})
    assert set(store.state.clients) == {"a", "b"}


def test_listeners_see_new_snapshots(store):
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.dispatch(connect("a"))
    store.dispatch({"type": "DISCONNECT", "data": {"id": "ghost"}})
    assert len(seen) == 1
    assert seen[0] is store.state

    unsubscribe()
    store.dispatch(connect("b"))
    assert len(seen) == 1


def test_failed_dispatch_keeps_snapshot(store):
    store.dispatch(connect("a"))
    before = store.state

    with pytest.raises(InvalidDirection):
        store.dispatch(swipe("a", "BACKWARDS"))

    assert store.state is before
    [failure] = store.trace.find_all(action="SWIPE")
    assert failure.failed
    assert "InvalidDirection" in failure.info["error"]


def test_tick(store):
    store.dispatch(connect("a"))
    store.tick()
    store.tick()
    assert store.state.clients["a"].data["ticks"] == 2


def test_trace_records_every_dispatch(store):
    store.dispatch(connect("a"))
    store.dispatch({"type": "LEAVE_CLUSTER", "data": {"id": "ghost"}})

    events = store.trace.get_events()
    assert [e.action for e in events] == ["CONNECT", "LEAVE_CLUSTER"]
    assert [e.info["changed"] for e in events] == [True, False]
    assert [e.id for e in events] == [0, 1]
    assert all(e.duration_ms is not None for e in events)
    assert len(store.trace) == 2

    store.trace.clear()
    assert len(store.trace) == 0


def test_disabled_trace_records_nothing():
    store = Store(make_reducer(), trace=Trace(enabled=False))
    store.dispatch(connect("a"))
    assert len(store.trace) == 0
