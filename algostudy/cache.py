"""Fixed-size caches with least-recently-used and least-frequently-used eviction."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _check_size(max_size: int) -> int:
    if max_size < 0:
        raise ValueError("max_size must not be negative")
    return max_size


class LRUCache(Generic[K, V]):
    """Cache that evicts the least recently used entry once it holds more than max_size."""

    def __init__(self, max_size: int) -> None:
        self.max_size = _check_size(max_size)
        # Most recently used entries sit at the end.
        self._items: OrderedDict[K, V] = OrderedDict()

    def put(self, key: K, value: V) -> None:
        """Store a value and mark it as the most recently used."""
        self._items[key] = value
        self._items.move_to_end(key)
        if len(self._items) > self.max_size:
            self._items.popitem(last=False)

    def get(self, key: K) -> V:
        """Return the value for key and mark it as used. Raises KeyError if absent."""
        try:
            value = self._items[key]
        except KeyError:
            raise KeyError(f"there is no such key in cache: {key!r}") from None
        self._items.move_to_end(key)
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[tuple[K, V]]:
        """Return (key, value) pairs from the most to the least recently used."""
        return list(reversed(self._items.items()))


@dataclass
class _Entry(Generic[V]):
    value: V
    frequency: int


class LFUCache(Generic[K, V]):
    """Cache that evicts the least frequently used entry; ties go to the oldest one.

    A cache of size 0 stores nothing.
    """

    def __init__(self, max_size: int) -> None:
        self.max_size = _check_size(max_size)
        self._entries: dict[K, _Entry[V]] = {}
        # frequency -> keys, oldest first
        self._buckets: dict[int, OrderedDict[K, None]] = {}
        self._min_frequency = 0

    def _touch(self, key: K, entry: _Entry[V]) -> None:
        bucket = self._buckets[entry.frequency]
        del bucket[key]
        if not bucket:
            del self._buckets[entry.frequency]
            if self._min_frequency == entry.frequency:
                self._min_frequency += 1
        entry.frequency += 1
        self._buckets.setdefault(entry.frequency, OrderedDict())[key] = None

    def get(self, key: K) -> V:
        """Return the value for key and count the use. Raises KeyError if absent."""
        entry = self._entries.get(key) if self.max_size else None
        if entry is None:
            raise KeyError(f"there is no such key in cache: {key!r}")
        self._touch(key, entry)
        return entry.value

    def put(self, key: K, value: V) -> None:
        """Store a value; storing an existing key counts as a use of it."""
        if not self.max_size:
            return
        entry = self._entries.get(key)
        if entry is not None:
            entry.value = value
            self._touch(key, entry)
            return
        if len(self._entries) >= self.max_size:
            bucket = self._buckets[self._min_frequency]
            victim, _ = bucket.popitem(last=False)
            del self._entries[victim]
            if not bucket:
                del self._buckets[self._min_frequency]
        self._entries[key] = _Entry(value, 1)
        self._buckets.setdefault(1, OrderedDict())[key] = None
        self._min_frequency = 1

    def frequency(self, key: K) -> int:
        """Return how often key has been used. Raises KeyError if absent."""
        return self._entries[key].frequency

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> list[tuple[K, Any]]:
        """Return (key, value) pairs, most frequent first, newest first within a frequency."""
        return [
            (key, self._entries[key].value)
            for frequency in sorted(self._buckets, reverse=True)
            for key in reversed(self._buckets[frequency])
        ]