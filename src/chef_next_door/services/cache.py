"""Keyed store behind the query client."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass
class CacheEntry:
    """A cached value with its freshness state."""

    value: object
    fetched_at: float
    stale: bool = False


class Cache(Protocol):
    """Cache interface used by the query client."""

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for a key, fresh or stale."""

    def set(self, key: str, value: object) -> None:
        """Store a fresh value for a key."""

    def invalidate(self, key: str) -> bool:
        """Mark an entry stale, returning whether one existed."""

    def purge(self, key: str) -> None:
        """Drop an entry entirely."""

    def keys(self) -> list[str]:
        """Return all cached keys."""


@dataclass
class InMemoryCache(Cache):
    """In-process cache; entries live until purged or replaced."""

    _entries: dict[str, CacheEntry]
    _clock: Callable[[], float]

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries = {}
        self._clock = clock

    def get(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def set(self, key: str, value: object) -> None:
        self._entries[key] = CacheEntry(value=value, fetched_at=self._clock())

    def invalidate(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        entry.stale = True
        return True

    def purge(self, key: str) -> None:
        self._entries.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._entries)
