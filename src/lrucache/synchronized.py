"""Thread-safe owner for an ``LRUCache``.

Every call, reads included, goes through one lock: ``get`` promotes and
may drop expired entries, so there is no read-only fast path.
"""

from __future__ import annotations

import threading
from typing import Generic, List, Optional, Tuple

from .cache import LRUCache
from .models import TTL, Entry, K, V


class SynchronizedCache(Generic[K, V]):
    def __init__(self, cache: LRUCache[K, V]) -> None:
        self._cache = cache
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        with self._lock:
            return self._cache.capacity

    def cap(self) -> int:
        with self._lock:
            return self._cache.cap()

    def len(self) -> int:
        with self._lock:
            return self._cache.len()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __repr__(self) -> str:
        with self._lock:
            return f"{type(self).__name__}({self._cache!r})"

    def keys(self) -> List[K]:
        with self._lock:
            return self._cache.keys()

    def items(self) -> List[Tuple[K, V]]:
        with self._lock:
            return self._cache.items()

    def add(self, key: K, value: V, ttl: Optional[TTL] = None) -> None:
        with self._lock:
            self._cache.add(key, value, ttl)

    def get(self, key: K) -> Tuple[Optional[V], bool]:
        with self._lock:
            return self._cache.get(key)

    def peek(self, key: K) -> Tuple[Optional[V], bool]:
        with self._lock:
            return self._cache.peek(key)

    def contains(self, key: K) -> bool:
        with self._lock:
            return self._cache.contains(key)

    def remove(self, key: K) -> None:
        with self._lock:
            self._cache.remove(key)

    def remove_oldest(self) -> Tuple[Optional[K], Optional[V], bool]:
        with self._lock:
            return self._cache.remove_oldest()

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def clear_expired(self) -> int:
        with self._lock:
            return self._cache.clear_expired()

    def replace(self, key: K, value: V) -> None:
        with self._lock:
            self._cache.replace(key, value)

    def update_value(self, key: K, value: V) -> Entry[K, V]:
        with self._lock:
            return self._cache.update_value(key, value)

    def update_expiration(self, key: K, ttl: TTL) -> Entry[K, V]:
        with self._lock:
            return self._cache.update_expiration(key, ttl)

    def resize(self, capacity: int) -> int:
        with self._lock:
            return self._cache.resize(capacity)
