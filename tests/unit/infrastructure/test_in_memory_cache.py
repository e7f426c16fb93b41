"""Tests for the in-memory cache adapter."""

import pytest

from langrules.infrastructure.cache import memory_cache
from langrules.infrastructure.cache.memory_cache import InMemoryCache


@pytest.fixture
def clock(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(memory_cache.time, "time", lambda: now[0])
    return now


class TestInMemoryCache:
    """Keyed storage with expiry."""

    def test_put_and_get(self):
        cache = InMemoryCache()
        cache.put("language_rule_[1]", "rule")

        assert cache.get("language_rule_[1]") == "rule"
        assert len(cache) == 1

    def test_miss(self):
        assert InMemoryCache().get("language_rule_[1]") is None

    def test_delete(self):
        cache = InMemoryCache()
        cache.put("key", "value")

        cache.delete("key")
        cache.delete("missing")

        assert cache.get("key") is None

    def test_entries_expire(self, clock):
        cache = InMemoryCache(default_ttl_seconds=10)
        cache.put("key", "value")

        clock[0] += 9
        assert cache.get("key") == "value"
        clock[0] += 1
        assert cache.get("key") is None

    def test_per_entry_ttl(self, clock):
        cache = InMemoryCache(default_ttl_seconds=10)
        cache.put("short", "value", ttl_seconds=1)
        cache.put("forever", "value", ttl_seconds=0)

        clock[0] += 100

        assert cache.get("short") is None
        assert cache.get("forever") == "value"

    def test_zero_default_ttl_never_expires(self, clock):
        cache = InMemoryCache(default_ttl_seconds=0)
        cache.put("key", "value")

        clock[0] += 10**6

        assert cache.get("key") == "value"

    def test_cleanup_expired_entries(self, clock):
        cache = InMemoryCache(default_ttl_seconds=5)
        cache.put("old", 1)
        clock[0] += 3
        cache.put("new", 2)
        clock[0] += 3

        assert cache.cleanup_expired_entries() == 1
        assert len(cache) == 1
        assert cache.get("new") == 2
