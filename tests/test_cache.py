"""
Unit tests for ResponseCache and cache key derivation.
"""
from services.cache import MISSING, CacheEntry, ResponseCache, make_key


class TestMakeKey:

    def test_parameter_order_does_not_change_key(self):
        a = make_key("search", {"query": "sunset", "page": 1, "per_page": 15})
        b = make_key("search", {"per_page": 15, "page": 1, "query": "sunset"})
        assert a == b

    def test_key_is_endpoint_and_canonical_params(self):
        assert make_key("popular", {"page": 2, "min_width": 640}) == 'popular_{"min_width":640,"page":2}'

    def test_missing_params_serialize_as_empty_object(self):
        assert make_key("videos/42") == "videos/42_{}"
        assert make_key("videos/42", {}) == make_key("videos/42")

    def test_different_values_or_endpoints_differ(self):
        assert make_key("search", {"page": 1}) != make_key("search", {"page": 2})
        assert make_key("search", {"page": 1}) != make_key("popular", {"page": 1})


class TestResponseCache:

    def test_get_unknown_key_returns_none(self, cache):
        assert cache.get("never-stored") is None

    def test_get_returns_payload_after_put(self, cache):
        payload = {"videos": [{"id": 7}]}
        cache.put("k", payload)
        assert cache.get("k") == payload

    def test_expiry_window(self, cache, clock):
        """Stored at t=0 with ttl=300: fresh at 299s, gone at 301s."""
        payload = {"videos": ["..."]}
        cache.put("search_sunset_page1", payload)

        clock.advance(299)
        assert cache.get("search_sunset_page1") == payload

        clock.advance(2)
        assert cache.get("search_sunset_page1") is None

    def test_entry_is_stale_exactly_at_ttl(self, cache, clock):
        cache.put("k", "v")
        clock.advance(300)
        assert cache.get("k") is None

    def test_stale_entry_never_returned_even_if_not_purged(self, cache, clock):
        cache.put("k", "v")
        clock.advance(1000)
        assert cache.size() == 1
        assert cache.get("k") is None
        assert cache.size() == 0

    def test_last_write_wins(self, cache):
        cache.put("k", {"v": 1})
        cache.put("k", {"v": 2})
        assert cache.get("k") == {"v": 2}
        assert cache.size() == 1

    def test_replacement_put_resets_expiry(self, cache, clock):
        cache.put("k", "old")
        clock.advance(200)
        cache.put("k", "new")
        clock.advance(200)
        assert cache.get("k") == "new"

    def test_clear_returns_count_and_empties(self, cache):
        for i in range(3):
            cache.put(f"k{i}", i)

        assert cache.clear() == 3
        assert cache.size() == 0
        assert all(cache.get(f"k{i}") is None for i in range(3))

    def test_clear_on_empty_cache(self, cache):
        assert cache.clear() == 0

    def test_purge_expired_only_drops_stale(self, cache, clock):
        cache.put("old", 1)
        clock.advance(250)
        cache.put("new", 2)
        clock.advance(100)

        assert cache.purge_expired() == 1
        assert cache.size() == 1
        assert cache.get("new") == 2

    def test_entries_are_immutable_records(self, cache, clock):
        clock.now = 42.0
        cache.put("k", "v")
        entry = cache._store["k"]
        assert entry == CacheEntry(payload="v", stored_at=42.0)

    def test_instances_are_isolated(self):
        a = ResponseCache()
        b = ResponseCache()
        a.put("k", "v")
        assert b.get("k") is None
        assert len(a) == 1

    def test_stored_none_is_distinguishable_from_a_miss(self, cache):
        cache.put("k", None)

        assert cache.get("k", MISSING) is None
        assert cache.get("absent", MISSING) is MISSING
