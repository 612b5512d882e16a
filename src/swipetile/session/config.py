"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from swipetile.kernel.ports import Clock, IdFactory, random_id, system_clock

SWIPE_DELAY_TOLERANCE_MS = 100.0


@dataclass(frozen=True)
class SessionConfig:
    """Configuration bound to a reducer at construction.

    Attributes:
        coincidence_window_ms: How long a buffered swipe waits for its partner.
        clock: Millisecond clock read when a swipe arrives.
        new_cluster_id: Id source for clusters created on connect.
    """

    coincidence_window_ms: float = SWIPE_DELAY_TOLERANCE_MS
    clock: Clock = field(default=system_clock)
    new_cluster_id: IdFactory = field(default=random_id)
