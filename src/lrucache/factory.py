"""Factory for building a cache from configuration defaults.

Exposes get_cache, which returns a plain LRUCache or, when thread safety
is requested, one wrapped in SynchronizedCache.
"""

from __future__ import annotations

from typing import Optional, Union

from . import config
from .cache import LRUCache
from .clock import Clock
from .models import TTL
from .synchronized import SynchronizedCache


def get_cache(
    capacity: Optional[int] = None,
    *,
    default_ttl: Optional[TTL] = None,
    thread_safe: Optional[bool] = None,
    clock: Optional[Clock] = None,
) -> Union[LRUCache, SynchronizedCache]:
    """
    Build a cache, falling back to the LRU_CACHE_* environment defaults
    for any argument left as None.
    """

    cap = config.LRU_CACHE_CAPACITY if capacity is None else capacity
    ttl = config.LRU_CACHE_DEFAULT_TTL if default_ttl is None else default_ttl
    locked = config.LRU_CACHE_THREAD_SAFE if thread_safe is None else thread_safe

    cache: LRUCache = LRUCache(cap, default_ttl=ttl, clock=clock)
    if locked:
        return SynchronizedCache(cache)
    return cache
