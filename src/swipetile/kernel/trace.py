"""Runtime trace infrastructure - separate from session state.

Trace captures one Evidence entry per dispatched event for debugging. It
never participates in state transitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single dispatched event as seen by the store."""

    action: str
    id: int = 0
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None

    @property
    def failed(self) -> bool:
        return "error" in self.info


class Trace:
    """Append-only log of dispatched events.

    Performance guarantees:
    - Trace disabled → single None check overhead
    - Evidence append is O(1)
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: Event type that was dispatched (e.g. "SWIPE")
            info: Outcome details
            duration_ms: Transition duration

        Returns:
            Event ID, or None if tracing disabled
        """
        if not self.enabled:
            return None

        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                timestamp=datetime.now(UTC),
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, **kwargs: Any) -> list[Evidence]:
        """Find recorded events matching every criterion.

        A criterion matches either an Evidence attribute or an ``info`` key,
        e.g. ``find_all(action="SWIPE", merged=True)``.
        """
        return [
            e
            for e in self._events
            if all(getattr(e, k, None) == v or e.info.get(k) == v for k, v in kwargs.items())
        ]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
