"""Error types raised by session transitions.

A raised error rejects the whole event: the caller keeps the previous
snapshot as authoritative.
"""

from __future__ import annotations

from typing import Any


class SwipetileError(Exception):
    """Base class for every error raised by the package."""


class InvalidDirection(SwipetileError):
    """Swipe direction is not one of UP, DOWN, LEFT or RIGHT."""

    def __init__(self, direction: Any) -> None:
        self.direction = direction
        super().__init__(f"Invalid direction: {direction!r}")


class UnhandledClientActionType(SwipetileError):
    """No handler is registered for a client action type."""

    def __init__(self, action_type: str) -> None:
        self.action_type = action_type
        super().__init__(f"Unhandled client action: {action_type}")


class InvalidEvent(SwipetileError):
    """Event payload does not match the shape its type requires.

    The original validation error is kept for debugging.
    """

    def __init__(self, event_type: str, cause: Exception) -> None:
        self.event_type = event_type
        self.cause = cause
        super().__init__(f"Invalid {event_type} event: {cause}")

    def __repr__(self) -> str:
        return f"InvalidEvent({self.event_type!r}, cause={self.cause!r})"
