"""Classic sorting algorithms; each returns a new ascending list."""

from __future__ import annotations

from bisect import insort_right
from itertools import chain
from typing import Any, Iterable

BUCKET_COUNT = 10
RADIX = 10


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops early once a pass makes no swap."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Move the smallest remaining item to the front on each pass."""
    result = list(items)
    size = len(result)
    for start in range(size - 1):
        smallest = min(range(start, size), key=result.__getitem__)
        if smallest != start:
            result[start], result[smallest] = result[smallest], result[start]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Insert each item into the sorted prefix, scanning from the back."""
    result = list(items)
    for idx in range(1, len(result)):
        current = result[idx]
        pos = idx
        while pos > 0 and result[pos - 1] > current:
            result[pos] = result[pos - 1]
            pos -= 1
        result[pos] = current
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Gapped insertion sort, starting from a gap of half the length plus one."""
    result = list(items)
    size = len(result)
    step = size // 2 + 1
    while step >= 1:
        for idx in range(step, size):
            pos = idx
            while pos >= step and result[pos] < result[pos - step]:
                result[pos], result[pos - step] = result[pos - step], result[pos]
                pos -= step
        step //= 2
    return result


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    left = merge_sort(values[:mid])
    right = merge_sort(values[mid:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quick sort using the last element of each range as the pivot."""
    result = list(items)
    ranges = [(0, len(result) - 1)]
    while ranges:
        start, end = ranges.pop()
        if start >= end:
            continue
        pivot = result[end]
        boundary = start
        for idx in range(start, end):
            if result[idx] < pivot:
                result[idx], result[boundary] = result[boundary], result[idx]
                boundary += 1
        result[boundary], result[end] = result[end], result[boundary]
        ranges.append((start, boundary - 1))
        ranges.append((boundary + 1, end))
    return result


def _sift_down(heap: list[Any], size: int, idx: int) -> None:
    while True:
        largest = idx
        for child in (2 * idx + 1, 2 * idx + 2):
            if child < size and heap[child] > heap[largest]:
                largest = child
        if largest == idx:
            return
        heap[idx], heap[largest] = heap[largest], heap[idx]
        idx = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Build a max-heap, then repeatedly move its top to the end."""
    result = list(items)
    size = len(result)
    for idx in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, idx)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def _require_non_negative(values: list[int], name: str) -> None:
    if any(value < 0 for value in values):
        raise ValueError(f"{name} needs non-negative integers")


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    values = list(items)
    if len(values) <= 1:
        return values
    _require_non_negative(values, "counting sort")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers."""
    values = list(items)
    if not values:
        return values
    _require_non_negative(values, "radix sort")
    largest = max(values)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(RADIX)]
        for value in values:
            buckets[(value // exp) % RADIX].append(value)
        values = list(chain.from_iterable(buckets))
        exp *= RADIX
    return values


def bucket_sort(items: Iterable[int]) -> list[int]:
    """Spread integers over ten buckets by their tens digit, keep each bucket sorted, join.

    Values must fall in a bucket, that is value / 10 truncated lies in 0..9.
    """
    buckets: list[list[int]] = [[] for _ in range(BUCKET_COUNT)]
    for value in items:
        index = int(value / BUCKET_COUNT)
        if not 0 <= index < BUCKET_COUNT:
            raise ValueError(f"value {value} does not fit any of the {BUCKET_COUNT} buckets")
        insort_right(buckets[index], value)
    return list(chain.from_iterable(buckets))