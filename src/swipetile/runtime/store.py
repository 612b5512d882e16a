"""Store - single writer holding the latest session snapshot."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

from swipetile.kernel.events import Envelope, Event, NextStateEvent
from swipetile.kernel.model import State, initial_state
from swipetile.kernel.trace import Trace
from swipetile.session.reducer import Reducer

logger = logging.getLogger(__name__)

Listener = Callable[[State], None]


def _event_type(event: Event | Envelope | Mapping[str, Any]) -> str:
    if isinstance(event, Envelope):
        return event.type
    if isinstance(event, Mapping):
        return str(event.get("type"))
    return event.kind.value


class Store:
    """Runs events through a reducer one at a time.

    A failed transition leaves the current snapshot in place and re-raises.
    Listeners are notified only when a dispatch produced a new snapshot.
    """

    def __init__(self, reducer: Reducer, state: State | None = None, trace: Trace | None = None) -> None:
        self._reducer = reducer
        self._state = state if state is not None else initial_state()
        self._listeners: list[Listener] = []
        self.trace = trace

    @property
    def state(self) -> State:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event | Envelope | Mapping[str, Any]) -> State:
        action = _event_type(event)
        started = time.perf_counter()
        try:
            next_state = self._reducer(self._state, event)
        except Exception as exc:
            logger.debug("Rejected %s event: %s", action, exc)
            self._record(action, started, error=repr(exc))
            raise

        changed = next_state is not self._state
        self._state = next_state
        self._record(action, started, changed=changed)

        if changed:
            for listener in list(self._listeners):
                listener(next_state)
        return next_state

    def tick(self) -> State:
        return self.dispatch(NextStateEvent())

    def _record(self, action: str, started: float, **info: Any) -> None:
        if self.trace is None:
            return
        self.trace.record(action, info=info, duration_ms=(time.perf_counter() - started) * 1000)
