"""Session reducer - the transition function (state, event) -> state."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from swipetile.kernel.events import (
    ClientActionEvent,
    ConnectEvent,
    DisconnectEvent,
    Envelope,
    Event,
    LeaveClusterEvent,
    NextStateEvent,
    SwipeEvent,
    parse_event,
)
from swipetile.kernel.model import State, initial_state
from swipetile.kernel.policy import Policy
from swipetile.session.actions import client_action
from swipetile.session.config import SessionConfig
from swipetile.session.connection import connect
from swipetile.session.departure import disconnect, leave_cluster
from swipetile.session.swipes import swipe
from swipetile.session.tick import next_state

logger = logging.getLogger(__name__)


class Reducer:
    """Pure transition function bound to a host policy and configuration.

    Calling the reducer never mutates the state it is given. Unknown event
    types return that state unchanged; fatal errors propagate and leave it
    as the authoritative snapshot.

    Example:
        reduce = Reducer(policy)
        state = reduce(None, ConnectEvent(id="a", size=Size(320, 480)))
    """

    def __init__(self, policy: Policy, config: SessionConfig | None = None) -> None:
        self.policy = policy
        self.config = config or SessionConfig()
        self._handlers: dict[type, Callable[[State, Any], State]] = {
            NextStateEvent: lambda state, _: next_state(state, self.policy),
            ClientActionEvent: lambda state, event: client_action(state, event, self.policy),
            ConnectEvent: lambda state, event: connect(state, event, self.policy, self.config.new_cluster_id),
            SwipeEvent: lambda state, event: swipe(state, event, self.policy, self.config),
            LeaveClusterEvent: lambda state, event: leave_cluster(state, event),
            DisconnectEvent: lambda state, event: disconnect(state, event),
        }

    def __call__(self, state: State | None, event: Event | Envelope | Mapping[str, Any]) -> State:
        if state is None:
            state = initial_state()

        if not isinstance(event, tuple(self._handlers)):
            event = parse_event(event)
            if event is None:
                logger.debug("Ignoring event of unknown type")
                return state

        handler = self._handlers[type(event)]
        logger.debug("Reducing %s", event.kind.value)
        return handler(state, event)


def create_reducer(policy: Policy, config: SessionConfig | None = None) -> Reducer:
    """Create a reducer for ``policy``."""
    return Reducer(policy, config)
