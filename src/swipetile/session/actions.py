"""Client actions - an open set of host-defined event sub-types."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import replace
from typing import Any

from swipetile.kernel.errors import UnhandledClientActionType
from swipetile.kernel.events import ClientActionEvent
from swipetile.kernel.model import State
from swipetile.kernel.policy import ActionHandler, ActionOutcome, Policy
from swipetile.kernel.views import ClientView, client_view

logger = logging.getLogger(__name__)


class ActionRegistry(Mapping[str, ActionHandler]):
    """Registry mapping action type names to their handlers."""

    def __init__(self, handlers: Mapping[str, ActionHandler] | None = None) -> None:
        self._handlers: dict[str, ActionHandler] = dict(handlers or {})

    def register(self, action_type: str, handler: ActionHandler) -> None:
        """Register ``handler`` for ``action_type``, replacing any previous one."""
        self._handlers[action_type] = handler

    def action(self, action_type: str):
        """Decorator form of register()."""
        def decorator(handler: ActionHandler) -> ActionHandler:
            self.register(action_type, handler)
            return handler

        return decorator

    def run(self, client: ClientView, action_type: str, data: Any) -> ActionOutcome:
        handler = self._handlers.get(action_type)
        if handler is None:
            raise UnhandledClientActionType(action_type)
        return as_outcome(handler(client, data))

    def __getitem__(self, action_type: str) -> ActionHandler:
        return self._handlers[action_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)


def as_outcome(result: ActionOutcome | Mapping[str, Any] | None) -> ActionOutcome:
    if result is None:
        return ActionOutcome()
    if isinstance(result, ActionOutcome):
        return result
    return ActionOutcome(cluster=result.get("cluster"), client=result.get("client"))


def client_action(state: State, event: ClientActionEvent, policy: Policy) -> State:
    # Resolve the handler first: a missing handler is fatal even when the
    # target client is gone.
    registry = policy.client.actions
    if not isinstance(registry, ActionRegistry):
        registry = ActionRegistry(registry)
    if event.action_type not in registry:
        raise UnhandledClientActionType(event.action_type)

    client = state.clients.get(event.id)
    if client is None:
        logger.debug("CLIENT_ACTION %s for unknown client %s ignored", event.action_type, event.id)
        return state

    outcome = registry.run(client_view(state, client.id), event.action_type, event.data)
    changes = {}

    if outcome.cluster and client.cluster_id in state.clusters:
        cluster = state.clusters[client.cluster_id]
        changes["clusters"] = {**state.clusters, cluster.id: replace(cluster, **outcome.cluster)}

    if outcome.client:
        changes["clients"] = {**state.clients, client.id: replace(client, **outcome.client)}

    if not changes:
        return state
    return replace(state, **changes)
