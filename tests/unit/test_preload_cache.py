"""Activity preload cache behaviour."""

from __future__ import annotations

import tripgen.infrastructure.cache as cache_module
from tripgen.infrastructure.cache import ActivityPreloadCache


def test_preload_itinerary_replaces_previous_set_for_same_session(generator):
    cache = ActivityPreloadCache()
    first = generator.generate_itinerary("accra", "History", "1")
    second = generator.generate_itinerary("kumasi", "Culture", "1")

    cache.preload_itinerary("s1", first)
    assert cache.is_preloaded("s1", "elmina-castle")

    returned = cache.preload_itinerary("s1", second)
    assert returned == ["manhyia-palace", "kejetia-market"]
    assert not cache.is_preloaded("s1", "elmina-castle")
    assert cache.preloaded_ids("s1") == {"manhyia-palace", "kejetia-market"}


def test_sessions_do_not_overwrite_each_other(generator):
    cache = ActivityPreloadCache()
    cache.preload_itinerary("alice", generator.generate_itinerary("accra", "History", "1"))
    cache.preload_itinerary("bob", generator.generate_itinerary("kumasi", "Culture", "1"))

    assert cache.is_preloaded("alice", "buka-restaurant-day-1")
    assert not cache.is_preloaded("alice", "buka-restaurant")
    assert not cache.is_preloaded("bob", "elmina-castle")
    assert cache.stats == {"sessions": 2, "hits": 1, "misses": 2, "hit_rate": 0.333}

    cache.clear("alice")
    assert cache.preloaded_ids("alice") == set()
    assert cache.preloaded_ids("bob") == {"manhyia-palace", "kejetia-market"}

    cache.clear()
    assert cache.stats["sessions"] == 0
    assert cache.stats["hits"] == 0


def test_sessions_expire_after_ttl(generator, monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(cache_module.time, "time", lambda: now[0])
    cache = ActivityPreloadCache(default_ttl=10)
    cache.preload_itinerary("s1", generator.generate_itinerary("kumasi", "Culture", "1"))

    assert cache.is_preloaded("s1", "manhyia-palace")
    now[0] += 11
    assert not cache.is_preloaded("s1", "manhyia-palace")
    assert cache.stats["sessions"] == 0


def test_oldest_sessions_are_evicted_when_full(generator, monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(cache_module.time, "time", lambda: now[0])
    cache = ActivityPreloadCache(max_sessions=3)
    itinerary = generator.generate_itinerary("kumasi", "Culture", "1")
    for session_id in ("a", "b", "c"):
        cache.preload_itinerary(session_id, itinerary)
        now[0] += 1

    cache.preload_itinerary("d", itinerary)

    assert cache.preloaded_ids("a") == set()
    assert cache.preloaded_ids("d") == {"manhyia-palace", "kejetia-market"}
    assert cache.stats["sessions"] == 3
