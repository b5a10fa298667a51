"""Configuration and environment helpers for the cache.

Provides small helpers to read typed environment variables and exposes
the defaults used by ``lrucache.factory.get_cache`` (capacity, default
TTL and whether to wrap the engine in a lock).
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Capacity used when get_cache() is called without one
LRU_CACHE_CAPACITY = _env_int("LRU_CACHE_CAPACITY", 128)

# Seconds; 0 means entries never expire unless add() passes a ttl
LRU_CACHE_DEFAULT_TTL = _env_float("LRU_CACHE_DEFAULT_TTL", 0.0)

# Wrap the engine in SynchronizedCache
LRU_CACHE_THREAD_SAFE = _env_bool("LRU_CACHE_THREAD_SAFE", False)
