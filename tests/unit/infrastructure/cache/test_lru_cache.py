import pytest

from langcore.domain.exceptions import InvalidArgumentError
from langcore.infrastructure.cache.lru_cache import LRUCache


@pytest.fixture
def cache():
    return LRUCache(2, name="test")


def test_rejects_non_positive_capacity():
    with pytest.raises(InvalidArgumentError):
        LRUCache(0)
    with pytest.raises(ValueError):
        LRUCache(-5)


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for i in range(50):
        cache.put(f"k{i}", i)
        assert cache.size() <= 3
    assert cache.size() == 3


def test_evicts_least_recently_used(cache):
    cache.put("A", 1)
    cache.put("B", 2)
    assert cache.get("A") == 1
    cache.put("C", 3)

    assert cache.get("B") is None
    assert cache.get("A") == 1
    assert cache.get("C") == 3


def test_contains_key_does_not_refresh_recency(cache):
    cache.put("A", 1)
    cache.put("B", 2)
    assert cache.contains_key("A")
    cache.put("C", 3)

    assert cache.get("A") is None
    assert "B" in cache
    assert "C" in cache


def test_put_returns_previous_value_and_refreshes(cache):
    assert cache.put("A", 1) is None
    cache.put("B", 2)
    assert cache.put("A", 10) == 1
    cache.put("C", 3)

    assert cache.get("A") == 10
    assert cache.get("B") is None


def test_remove(cache):
    cache.put("A", 1)
    assert cache.remove("A") == 1
    assert cache.remove("A") is None
    assert cache.size() == 0


def test_clear_keeps_capacity(cache):
    cache.put("A", 1)
    cache.put("B", 2)
    cache.clear()
    assert cache.size() == 0
    assert len(cache) == 0
    assert cache.capacity() == 2


def test_resize_is_lazy():
    cache = LRUCache(4)
    for key in "ABCD":
        cache.put(key, key.lower())
    cache.resize(2)

    assert cache.capacity() == 2
    assert cache.size() == 4  # nothing evicted until the next put
    cache.put("E", "e")
    assert cache.size() == 2
    assert cache.get("D") == "d"
    assert cache.get("E") == "e"


def test_resize_rejects_non_positive(cache):
    with pytest.raises(InvalidArgumentError):
        cache.resize(0)
    assert cache.capacity() == 2


def test_repr_names_cache(cache):
    assert "test" in repr(cache)
