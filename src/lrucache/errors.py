from __future__ import annotations

from typing import Hashable


class CacheError(Exception):
    """Base error for the cache engine."""


class InvalidCapacityError(CacheError, ValueError):
    """Raised when a cache is created or resized with capacity <= 0."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        if capacity == 0:
            msg = "capacity must be positive, got zero"
        else:
            msg = f"capacity must be positive, got negative value {capacity}"
        super().__init__(msg)


class EmptyCacheError(CacheError):
    """Raised when a removal is requested against an empty cache."""

    def __init__(self) -> None:
        super().__init__("cache is empty")


class KeyNotFoundError(CacheError, KeyError):
    """Raised when an update or replace targets a key that is not stored."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"
