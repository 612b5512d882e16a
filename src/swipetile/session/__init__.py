"""Session layer - the transition function and its handlers."""

from swipetile.session.actions import ActionRegistry
from swipetile.session.config import SWIPE_DELAY_TOLERANCE_MS, SessionConfig
from swipetile.session.openings import get_openings
from swipetile.session.reducer import Reducer, create_reducer

__all__ = [
    "ActionRegistry",
    "Reducer",
    "SessionConfig",
    "SWIPE_DELAY_TOLERANCE_MS",
    "create_reducer",
    "get_openings",
]
