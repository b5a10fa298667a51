"""In-memory LRU cache with optional per-entry TTL expiration.

Keeps a doubly linked list (front = most recently used) and a dict mapping
each key to its list node, so lookup, promotion and removal are O(1).
Expiration is lazy: ``get`` drops an expired entry it touches, and
``clear_expired`` sweeps the rest when the caller asks for it. Nothing runs
in the background and nothing is locked; see ``SynchronizedCache`` for a
thread-safe owner.
"""

from __future__ import annotations

import logging
from typing import Dict, Generic, Iterator, List, Optional, Tuple

from .clock import Clock, monotonic_ns
from .errors import EmptyCacheError, InvalidCapacityError, KeyNotFoundError
from .linked_list import LinkedList, Node
from .models import TTL, Entry, K, V, expiration_from_ttl

logger = logging.getLogger(__name__)


class LRUCache(Generic[K, V]):
    """Bounded key-value cache evicting the least recently used entry.

    Purpose:
      - add(key, value, ttl) inserts or overwrites and promotes.
      - get(key) reads with promotion; peek/contains never touch ordering.
      - remove / remove_oldest / clear / clear_expired / resize shrink it.

    Invariant: ``len(self._order) == len(self._index)`` after every call,
    and every indexed node holds an entry with the same key.
    """

    def __init__(
        self,
        capacity: int,
        *,
        default_ttl: TTL = 0,
        clock: Optional[Clock] = None,
    ) -> None:
        if capacity <= 0:
            raise InvalidCapacityError(capacity)
        self._capacity = int(capacity)
        self._default_ttl = default_ttl
        self._clock: Clock = clock or monotonic_ns
        self._order: LinkedList[Entry[K, V]] = LinkedList()
        self._index: Dict[K, Node[Entry[K, V]]] = {}

    # -- accessors -------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    def cap(self) -> int:
        return self._capacity

    def len(self) -> int:
        return len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self)}, capacity={self._capacity})"

    def keys(self) -> List[K]:
        """Keys ordered from most to least recently used."""
        return [entry.key for entry in self._order]

    def items(self) -> List[Tuple[K, V]]:
        return [(entry.key, entry.value) for entry in self._order]

    # -- insertion -------------------------------------------------------

    def add(self, key: K, value: V, ttl: Optional[TTL] = None) -> None:
        """Insert or overwrite ``key`` and mark it most recently used.

        ``ttl`` is seconds or a timedelta; 0 never expires, a negative
        value stores an already expired entry. ``None`` uses the cache's
        ``default_ttl``.
        """
        expires_at = expiration_from_ttl(
            self._default_ttl if ttl is None else ttl, self._clock()
        )

        node = self._index.get(key)
        if node is not None:
            node.value.value = value
            node.value.expires_at = expires_at
            self._order.move_to_front(node)
            return

        if len(self._index) >= self._capacity:
            evicted = self._evict_oldest()
            if evicted is not None:
                logger.debug("Evicted %r to make room for %r", evicted.key, key)

        entry = Entry(key=key, value=value, expires_at=expires_at, clock=self._clock)
        self._index[key] = self._order.push_front(entry)

    # -- reads -----------------------------------------------------------

    def get(self, key: K) -> Tuple[Optional[V], bool]:
        """Return ``(value, True)`` and promote, or ``(None, False)``.

        An expired entry is removed as a side effect of the lookup.
        """
        node = self._index.get(key)
        if node is None:
            return None, False

        entry = node.value
        if entry.expired(self._clock()):
            self._remove_node(node)
            logger.debug("Dropped expired entry %r on read", key)
            return None, False

        self._order.move_to_front(node)
        return entry.value, True

    def peek(self, key: K) -> Tuple[Optional[V], bool]:
        # Raw physical presence; expiration and ordering are left alone
        node = self._index.get(key)
        if node is None:
            return None, False
        return node.value.value, True

    def contains(self, key: K) -> bool:
        return key in self._index

    # -- removal ---------------------------------------------------------

    def remove(self, key: K) -> None:
        """Delete ``key``; a missing key is a no-op unless the cache is empty."""
        if not self._index:
            raise EmptyCacheError()
        node = self._index.get(key)
        if node is not None:
            self._remove_node(node)

    def remove_oldest(self) -> Tuple[Optional[K], Optional[V], bool]:
        entry = self._evict_oldest()
        if entry is None:
            return None, None, False
        return entry.key, entry.value, True

    def clear(self) -> None:
        self._order.clear()
        self._index.clear()

    def clear_expired(self) -> int:
        """Sweep every expired entry; returns how many were removed."""
        if not self._index:
            return 0

        now = self._clock()
        removed = 0
        for node in self._order.iter_back_to_front():
            if node.value.expired(now):
                self._remove_node(node)
                removed += 1

        if removed:
            logger.debug("Swept %d expired entries, %d remain", removed, len(self._index))
        return removed

    # -- updates ---------------------------------------------------------

    def replace(self, key: K, value: V) -> None:
        """Swap the value in place; expiration and recency are preserved."""
        node = self._index.get(key)
        if node is None:
            raise KeyNotFoundError(key)
        node.value.value = value

    def update_value(self, key: K, value: V) -> Entry[K, V]:
        """Swap the value, keep the expiration, promote; returns a snapshot."""
        node = self._index.get(key)
        if node is None:
            raise KeyNotFoundError(key)
        node.value.value = value
        self._order.move_to_front(node)
        return node.value.snapshot()

    def update_expiration(self, key: K, ttl: TTL) -> Entry[K, V]:
        """Recompute the expiration from ``ttl``, keep the value, promote."""
        node = self._index.get(key)
        if node is None:
            raise KeyNotFoundError(key)
        node.value.expires_at = expiration_from_ttl(ttl, self._clock())
        self._order.move_to_front(node)
        return node.value.snapshot()

    # -- capacity --------------------------------------------------------

    def resize(self, capacity: int) -> int:
        """Change capacity, evicting LRU entries until they fit.

        Returns the number of evicted entries (0 when growing).
        """
        if capacity <= 0:
            raise InvalidCapacityError(capacity)
        self._capacity = int(capacity)

        evicted = 0
        while len(self._index) > self._capacity:
            self._evict_oldest()
            evicted += 1

        if evicted:
            logger.debug("Resize to %d evicted %d entries", self._capacity, evicted)
        return evicted

    # -- internals -------------------------------------------------------

    def _evict_oldest(self) -> Optional[Entry[K, V]]:
        entry = self._order.pop_back()
        if entry is not None:
            del self._index[entry.key]
        return entry

    def _remove_node(self, node: Node[Entry[K, V]]) -> None:
        # Index and order are always updated together
        entry = self._order.remove(node)
        del self._index[entry.key]
