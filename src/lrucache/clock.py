"""Time sources for TTL computation.

Expiration is compared against integer nanosecond instants. The default
source is ``time.monotonic_ns`` so wall-clock shifts never resurrect or
expire entries early; tests inject their own callable.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Contract for any "now" source used by the cache."""
    def __call__(self) -> int:
        ...


def monotonic_ns() -> int:
    # Looked up at call time so tests can monkeypatch clock.time.monotonic_ns
    return time.monotonic_ns()
