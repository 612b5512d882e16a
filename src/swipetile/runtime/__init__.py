"""Runtime layer - stateful holders around the pure reducer."""

from swipetile.runtime.store import Listener, Store

__all__ = ["Listener", "Store"]
