import pytest

from src.core.cache.bounded_cache import BoundedOrderedCache

class TestBoundedOrderedCache:
    """Tests for the BoundedOrderedCache class"""

    class TestCapacity:
        """Tests for capacity enforcement"""

        @pytest.mark.parametrize("max_size", [1, 2, 5])
        def test_size_never_exceeds_maximum(self, max_size):
            """Test that size stays within max_size after every set"""
            cache = BoundedOrderedCache(max_size)

            for i in range(max_size * 3):
                cache.set(f"key_{i}", i)
                assert cache.size <= max_size

            assert cache.size == max_size

        def test_oldest_entry_is_evicted_first(self):
            """Test that inserting N+1 keys evicts the first one"""
            cache = BoundedOrderedCache(3)

            for key in ["k1", "k2", "k3", "k4"]:
                cache.set(key, key.upper())

            assert list(cache) == ["k2", "k3", "k4"]
            assert cache.get("k1") is None

        def test_update_in_place(self):
            """Test that setting an existing key replaces the value without eviction"""
            cache = BoundedOrderedCache(2)
            first, second = object(), object()

            cache.set("a", first)
            cache.set("b", "b")
            cache.set("a", second)

            assert cache.size == 2
            assert cache.get("a") is second
            assert list(cache) == ["a", "b"]

        def test_disabled_cache_stores_nothing(self):
            """Test that max_size 0 turns set into a no-op"""
            cache = BoundedOrderedCache(0)

            for i in range(5):
                cache.set(i, i)
                assert cache.size == 0

            assert cache.get(0) is None
            assert cache.disabled is True

        @pytest.mark.parametrize("max_size", [None, -1])
        def test_unbounded_cache(self, max_size):
            """Test that negative or unset max_size never evicts"""
            cache = BoundedOrderedCache(max_size)

            for i in range(1000):
                cache.set(i, i)

            assert cache.size == 1000
            assert cache.first_key() == 0
            assert cache.bounded is False

    class TestMaxSizeChange:
        """Tests for changing max_size at runtime"""

        def test_lowering_max_size_trims_oldest(self):
            """Test that lowering the maximum evicts the oldest entries"""
            cache = BoundedOrderedCache(5)
            for i in range(5):
                cache.set(i, i)

            cache.max_size = 2

            assert list(cache) == [3, 4]

        def test_setting_zero_clears_cache(self):
            """Test that disabling the cache drops its entries"""
            cache = BoundedOrderedCache(5)
            cache.set("a", 1)

            cache.max_size = 0

            assert cache.size == 0

        def test_raising_max_size_keeps_entries(self):
            """Test that raising the maximum leaves entries alone"""
            cache = BoundedOrderedCache(2)
            cache.set("a", 1)
            cache.set("b", 2)

            cache.max_size = 10
            cache.set("c", 3)

            assert list(cache) == ["a", "b", "c"]

    class TestAccess:
        """Tests for get/delete/first_key"""

        def test_delete(self):
            """Test deleting present and missing keys"""
            cache = BoundedOrderedCache(3)
            cache.set("a", 1)

            assert cache.delete("a") is True
            assert cache.delete("a") is False
            assert "a" not in cache

        def test_first_key(self):
            """Test first_key follows insertion order"""
            cache = BoundedOrderedCache(3)
            assert cache.first_key() is None

            cache.set("a", 1)
            cache.set("b", 2)
            assert cache.first_key() == "a"
