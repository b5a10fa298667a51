"""Entry dataclass stored per key plus TTL conversion helpers.

An entry's ``expires_at`` is an absolute nanosecond instant taken from the
owning cache's clock; ``NEVER_EXPIRES`` (0) marks entries without a TTL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Generic, Hashable, Optional, TypeVar, Union

from .clock import Clock, monotonic_ns

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

TTL = Union[float, int, timedelta]

NEVER_EXPIRES = 0
_NS_PER_SECOND = 1_000_000_000


def ttl_to_ns(ttl: TTL) -> int:
    """Convert seconds (or a timedelta) to integer nanoseconds.

    A non-zero ttl never rounds to 0; it keeps at least 1ns and its sign.
    """
    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
    else:
        seconds = float(ttl)
    if seconds == 0:
        return 0
    delta = int(round(seconds * _NS_PER_SECOND))
    if delta == 0:
        return 1 if seconds > 0 else -1
    return delta


def expiration_from_ttl(ttl: TTL, now: int) -> int:
    """Absolute expiration instant for ``ttl``; zero ttl never expires."""
    delta = ttl_to_ns(ttl)
    if delta == 0:
        return NEVER_EXPIRES
    expires_at = now + delta
    # 0 is reserved for "never"; nudge an exact collision into the past
    return expires_at if expires_at != NEVER_EXPIRES else -1


@dataclass(slots=True)
class Entry(Generic[K, V]):
    # Key is immutable once inserted; value and expires_at are updated in place
    key: K
    value: V
    expires_at: int = NEVER_EXPIRES
    # The owning cache's "now" source, so snapshots agree with the cache
    clock: Clock = field(default=monotonic_ns, compare=False, repr=False)

    def expired(self, now: Optional[int] = None) -> bool:
        if self.expires_at == NEVER_EXPIRES:
            return False
        if now is None:
            now = self.clock()
        return self.expires_at <= now

    def snapshot(self) -> "Entry[K, V]":
        return Entry(
            key=self.key, value=self.value, expires_at=self.expires_at, clock=self.clock
        )
