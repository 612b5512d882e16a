"""Port protocols for the session core - injectable time and ids."""

from __future__ import annotations

import time
import uuid
from typing import Protocol


class Clock(Protocol):
    """Wall clock in milliseconds."""

    def __call__(self) -> float:
        ...


class IdFactory(Protocol):
    """Source of fresh, unique identifiers."""

    def __call__(self) -> str:
        ...


def system_clock() -> float:
    return time.time() * 1000


def random_id() -> str:
    return uuid.uuid4().hex
