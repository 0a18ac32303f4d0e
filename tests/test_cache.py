"""Tests for the in-process estimate cache."""

import threading

from nutrition_estimator.services.cache import MemoryCache, cache_key


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_cache_key_normalizes_inputs() -> None:
    assert cache_key("  Chicken   Breast", "6 OZ ") == "calc:chicken breast:6 oz"


def test_get_and_set_count_hits_and_misses() -> None:
    cache = MemoryCache(max_entries=10, ttl_seconds=60)

    assert cache.get("a") is None
    cache.set("a", 1)
    assert cache.get("a") == 1

    stats = cache.stats()
    assert stats.size == 1
    assert stats.hits == 1
    assert stats.misses == 1
    assert stats.popular == [("a", 1)]


def test_entries_expire_after_ttl() -> None:
    clock = _Clock()
    cache = MemoryCache(max_entries=10, ttl_seconds=60, clock=clock)
    cache.set("a", 1)
    for _ in range(5):
        cache.get("a")

    clock.now = 61

    assert cache.get("a") is None
    assert cache.stats().size == 0


def test_eviction_keeps_popular_entries() -> None:
    cache = MemoryCache(max_entries=2, ttl_seconds=60)
    cache.set("popular", "p")
    cache.set("cold", "c")
    cache.get("popular")

    cache.set("new", "n")

    assert cache.get("popular") == "p"
    assert cache.get("cold") is None
    assert cache.get("new") == "n"
    assert cache.stats().evictions == 1



def test_expired_entries_are_dropped_before_live_ones_are_evicted() -> None:
    clock = _Clock()
    cache = MemoryCache(max_entries=3, ttl_seconds=60, clock=clock)
    cache.set("stale-1", 1)
    cache.set("stale-2", 2)
    for _ in range(5):
        cache.get("stale-1")
        cache.get("stale-2")
    clock.now = 30
    cache.set("live", "l")

    clock.now = 70
    cache.set("new", "n")

    assert cache.get("live") == "l"
    assert cache.get("new") == "n"
    assert cache.stats().size == 2
    assert cache.stats().evictions == 0


def test_overwriting_an_entry_does_not_evict() -> None:
    cache = MemoryCache(max_entries=1, ttl_seconds=60)
    cache.set("a", 1)
    cache.set("a", 2)

    assert cache.get("a") == 2
    assert cache.stats().evictions == 0


def test_clear_resets_entries_and_counters() -> None:
    cache = MemoryCache(max_entries=10, ttl_seconds=60)
    cache.set("a", 1)
    cache.get("a")

    cache.clear()

    stats = cache.stats()
    assert stats.size == 0
    assert stats.hits == 0
    assert stats.popular == []


def test_concurrent_writes_respect_bound() -> None:
    cache = MemoryCache(max_entries=20, ttl_seconds=60)

    def writer(offset: int) -> None:
        for index in range(100):
            cache.set(f"key-{offset}-{index}", index)
            cache.get(f"key-{offset}-{index}")

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert cache.stats().size == 20
