import pytest

from algostudy.cache import LFUCache, LRUCache


def _filled_lru(size=5):
    cache = LRUCache(size)
    for idx in range(size):
        cache.put(f"key_{idx}", idx)
    return cache


def test_lru_items_most_recent_first():
    cache = _filled_lru()
    assert [k for k, _ in cache.items()] == [f"key_{i}" for i in range(4, -1, -1)]
    assert len(cache) == 5


def test_lru_evicts_least_recent():
    cache = _filled_lru()
    cache.put("put_key", 1)
    assert len(cache) == 5
    assert "key_0" not in cache
    assert cache.items()[0] == ("put_key", 1)


def test_lru_put_existing_updates_and_moves_to_front():
    cache = _filled_lru()
    cache.put("key_2", 1)
    assert len(cache) == 5
    assert cache.items()[0] == ("key_2", 1)


def test_lru_get_moves_to_front():
    cache = _filled_lru()
    assert cache.get("key_3") == 3
    assert cache.items()[0] == ("key_3", 3)
    cache.put("new", 9)
    assert "key_0" not in cache
    assert "key_3" in cache


def test_lru_get_missing_raises():
    cache = LRUCache(2)
    with pytest.raises(KeyError):
        cache.get("absent")


def test_lru_zero_size_holds_nothing():
    cache = LRUCache(0)
    cache.put("a", 1)
    assert len(cache) == 0
    assert "a" not in cache


def test_lru_negative_size_rejected():
    with pytest.raises(ValueError):
        LRUCache(-1)


def test_lfu_evicts_least_frequent():
    cache = LFUCache(2)
    cache.put(1, 10)
    cache.put(2, 11)
    assert cache.get(1) == 10
    assert cache.get(1) == 10
    cache.get(2)
    cache.get(1)
    cache.get(2)
    cache.put(3, 12)
    assert 2 not in cache
    assert cache.get(1) == 10
    assert cache.get(3) == 12


def test_lfu_tie_evicts_oldest():
    cache = LFUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    assert "a" not in cache
    assert "b" in cache and "c" in cache
    assert len(cache) == 2


def test_lfu_frequency_counts_uses():
    cache = LFUCache(3)
    cache.put("x", 1)
    assert cache.frequency("x") == 1
    cache.get("x")
    cache.put("x", 5)
    assert cache.frequency("x") == 3
    assert cache.get("x") == 5


def test_lfu_items_ordered_by_frequency():
    cache = LFUCache(3)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    cache.get("b")
    cache.get("b")
    cache.get("a")
    assert [k for k, _ in cache.items()] == ["b", "a", "c"]


def test_lfu_get_missing_raises():
    cache = LFUCache(2)
    with pytest.raises(KeyError):
        cache.get(42)


def test_lfu_zero_size():
    cache = LFUCache(0)
    cache.put(1, 1)
    assert len(cache) == 0
    with pytest.raises(KeyError):
        cache.get(1)