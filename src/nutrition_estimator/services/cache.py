"""Bounded in-process cache for computed estimates."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from nutrition_estimator.domain.estimates import CacheStats

_POPULARITY_WEIGHT = 2
_POPULARITY_FACTOR = 4
_POPULAR_LIMIT = 10


class Cache(Protocol):
    """Cache interface for estimate payloads."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object) -> None:
        """Store a value, evicting the least valuable entry when full."""

    def stats(self) -> CacheStats:
        """Return usage counters."""

    def clear(self) -> None:
        """Drop every entry and reset counters."""


def cache_key(ingredient: str, measurement: str) -> str:
    """Key estimates by lowercased, whitespace-collapsed inputs."""
    return "calc:{}:{}".format(
        " ".join(ingredient.lower().split()), " ".join(measurement.lower().split())
    )


@dataclass
class _CacheEntry:
    value: object
    inserted_at: float
    access_count: int = 0


class MemoryCache(Cache):
    """Thread-safe cache evicting by access count plus long-lived popularity.

    Entries expire after ``ttl_seconds`` regardless of how popular they are.
    Expired entries are dropped before a live entry is evicted to make room.
    Popularity survives eviction so that frequently requested keys win their
    slot back quickly.
    """

    def __init__(
        self,
        max_entries: int = 2000,
        ttl_seconds: int = 7200,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}
        self._popularity: dict[str, int] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: str) -> object | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if self._clock() - entry.inserted_at >= self.ttl_seconds:
                del self._entries[key]
                self._misses += 1
                return None
            entry.access_count += 1
            self._popularity[key] = self._popularity.get(key, 0) + 1
            self._hits += 1
            return entry.value

    def set(self, key: str, value: object) -> None:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.max_entries:
                self._purge_expired()
            if key not in self._entries and len(self._entries) >= self.max_entries:
                self._evict()
            self._entries[key] = _CacheEntry(value=value, inserted_at=self._clock())
            self._popularity.setdefault(key, 0)
            self._trim_popularity()

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [
            key
            for key, entry in self._entries.items()
            if now - entry.inserted_at >= self.ttl_seconds
        ]
        for key in expired:
            del self._entries[key]

    def _evict(self) -> None:
        victim = min(
            self._entries,
            key=lambda k: self._entries[k].access_count
            + _POPULARITY_WEIGHT * self._popularity.get(k, 0),
        )
        del self._entries[victim]
        self._evictions += 1

    def _trim_popularity(self) -> None:
        limit = self.max_entries * _POPULARITY_FACTOR
        if len(self._popularity) <= limit:
            return
        ranked = sorted(self._popularity.items(), key=lambda kv: kv[1], reverse=True)
        self._popularity = dict(ranked[:limit])

    def stats(self) -> CacheStats:
        with self._lock:
            popular = sorted(
                self._popularity.items(), key=lambda kv: kv[1], reverse=True
            )
            return CacheStats(
                size=len(self._entries),
                max_entries=self.max_entries,
                ttl_seconds=self.ttl_seconds,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                popular=[item for item in popular[:_POPULAR_LIMIT] if item[1] > 0],
            )

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._popularity.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0
