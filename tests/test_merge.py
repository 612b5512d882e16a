from __future__ import annotations

import pytest

from swipetile.kernel import Client, Direction, InvalidDirection, Point, Size, Swipe, Transform
from swipetile.session.merge import get_transform

from fakes import FakeClock, RecordingHooks, assert_invariants, connect, make_policy, make_reducer, swipe


def make_client(client_id, x=0, y=0, width=100, height=200):
    return Client(id=client_id, size=Size(width, height), transform=Transform(x, y))


def make_swipe(client_id, direction, x=0, y=0):
    return Swipe(client_id, direction, Point(x, y), timestamp=0)


class TestGetTransform:
    """Placement of B relative to A for each swiped direction."""

    def setup_method(self):
        self.a = make_client("a", x=10, y=20, width=100, height=200)
        self.b = make_client("b", width=50, height=80)

    def test_left(self):
        t = get_transform(self.a, make_swipe("a", Direction.LEFT, y=60), self.b, make_swipe("b", Direction.RIGHT, y=40))
        assert t == Transform(10 - 50, 20 + 20)

    def test_right(self):
        t = get_transform(self.a, make_swipe("a", Direction.RIGHT, y=60), self.b, make_swipe("b", Direction.LEFT, y=40))
        assert t == Transform(10 + 100, 20 + 20)

    def test_up(self):
        t = get_transform(self.a, make_swipe("a", Direction.UP, x=30), self.b, make_swipe("b", Direction.DOWN, x=45))
        assert t == Transform(10 - 15, 20 - 80)

    def test_down(self):
        t = get_transform(self.a, make_swipe("a", Direction.DOWN, x=30), self.b, make_swipe("b", Direction.UP, x=45))
        assert t == Transform(10 - 15, 20 + 200)

    def test_unknown_direction(self):
        with pytest.raises(InvalidDirection):
            get_transform(self.a, make_swipe("a", "DIAGONAL"), self.b, make_swipe("b", Direction.UP))


def test_merge_moves_whole_absorbed_cluster():
    clock = FakeClock()
    hooks = RecordingHooks()
    reduce = make_reducer(make_policy(hooks), clock=clock)

    state = None
    for client_id in ("a", "b", "c"):
        state = reduce(state, connect(client_id))
    state = reduce(state, swipe("a", "RIGHT"))
    state = reduce(state, swipe("b", "LEFT"))
    clock.advance(1000)

    state = reduce(state, swipe("c", "DOWN"))
    state = reduce(state, swipe("a", "UP"))

    a, b, c = (state.clients[i] for i in "abc")
    assert {a.cluster_id, b.cluster_id, c.cluster_id} == {"cluster-3"}
    assert list(state.clusters) == ["cluster-3"]
    assert a.transform == Transform(0, 200)
    assert b.transform == Transform(100, 200)
    assert c.adjacent_client_ids == {"a"}
    assert a.adjacent_client_ids == {"b", "c"}
    assert b.adjacent_client_ids == {"a"}

    assert c.openings.bottom == ()
    assert a.openings.top == ()
    assert a.openings.right == ()
    assert state.clusters["cluster-3"].data == {"members": ("c", "a", "b")}
    assert_invariants(state)


def test_merge_hook_sees_both_clusters_before_merge():
    clock = FakeClock()
    hooks = RecordingHooks()
    reduce = make_reducer(make_policy(hooks), clock=clock)

    state = reduce(reduce(None, connect("a")), connect("b"))
    state = reduce(state, swipe("a", "DOWN", 20, 0))
    reduce(state, swipe("b", "UP", 5, 0))

    [(survivor, absorbed, transform)] = hooks.merges
    assert survivor.id == "cluster-1"
    assert [c.id for c in survivor.clients] == ["a"]
    assert absorbed.id == "cluster-2"
    assert [c.id for c in absorbed.clients] == ["b"]
    assert absorbed.clients[0].transform == Transform(0, 0)
    assert transform == Transform(15, 200)
