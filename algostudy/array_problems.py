"""Greedy and two-pointer problems on arrays, intervals and strings."""

from __future__ import annotations

from typing import Sequence, TypeVar

P = TypeVar("P", bound=Sequence[int])


def two_sum_pairs(nums: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return index pairs whose values add up to target.

    Values are scanned in ascending order from both ends. After a match only the
    lower end advances. Each pair holds the index of the smaller value first.
    """
    ordered = sorted((value, idx) for idx, value in enumerate(nums))
    low, high = 0, len(ordered) - 1
    pairs: list[tuple[int, int]] = []
    while low < high:
        total = ordered[low][0] + ordered[high][0]
        if total == target:
            pairs.append((ordered[low][1], ordered[high][1]))
            low += 1
        elif total < target:
            low += 1
        else:
            high -= 1
    return pairs


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of non-overlapping buy/sell trades."""
    return sum(max(0, after - before) for before, after in zip(prices, prices[1:]))


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so each child gets one and beats lower-rated neighbours."""
    counts = [1] * len(ratings)
    for idx in range(1, len(ratings)):
        if ratings[idx] > ratings[idx - 1]:
            counts[idx] = max(counts[idx], counts[idx - 1] + 1)
    for idx in range(len(ratings) - 1, 0, -1):
        if ratings[idx - 1] > ratings[idx]:
            counts[idx - 1] = max(counts[idx - 1], counts[idx] + 1)
    return sum(counts)


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Return how many intervals must go so that the rest do not overlap."""
    if not intervals:
        return 0
    ordered = sorted(intervals, key=lambda interval: interval[1])
    removed = 0
    end = ordered[0][1]
    for start, stop in ((iv[0], iv[1]) for iv in ordered[1:]):
        if start < end:
            removed += 1
        else:
            end = stop
    return removed


def min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Return the fewest vertical arrows that burst every balloon [start, end]."""
    if not points:
        return 0
    ordered = sorted(points, key=lambda point: point[1])
    arrows = len(ordered)
    end = ordered[0][1]
    for start, stop in ((pt[0], pt[1]) for pt in ordered[1:]):
        if start > end:
            end = stop
        else:
            arrows -= 1
    return arrows


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Return how many children can get a cookie at least as large as their greed."""
    children = sorted(greed)
    cookies = sorted(sizes)
    child = 0
    for cookie in cookies:
        if child == len(children):
            break
        if children[child] <= cookie:
            child += 1
    return child


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether n flowers fit into empty plots with no two adjacent.

    The given bed is left unchanged. A bed of a single plot answers only
    whether that plot is empty.
    """
    if not n:
        return True
    if len(flowerbed) == 1:
        return not flowerbed[0]
    bed = list(flowerbed)
    last = len(bed) - 1
    planted = 0
    for idx, plot in enumerate(bed):
        if plot:
            continue
        left_free = idx == 0 or not bed[idx - 1]
        right_free = idx == last or not bed[idx + 1]
        if left_free and right_free:
            bed[idx] = 1
            planted += 1
    return planted >= n


def partition_labels(text: str) -> list[int]:
    """Split text into as many parts as possible with each letter in one part; return sizes."""
    last = {char: idx for idx, char in enumerate(text)}
    sizes: list[int] = []
    start = end = 0
    for idx, char in enumerate(text):
        end = max(end, last[char])
        if idx == end:
            sizes.append(end - start + 1)
            start = end + 1
    return sizes


def reconstruct_queue(people: Sequence[P]) -> list[P]:
    """Order [height, k] entries so each has exactly k people at least as tall in front.

    Raises ValueError when no such order exists.
    """
    queue: list[P] = []
    for person in sorted(people, key=lambda p: (-p[0], p[1])):
        ahead = person[1]
        if not 0 <= ahead <= len(queue):
            raise ValueError(f"queue cannot be rebuilt: {list(person)!r}")
        queue.insert(ahead, person)
    return queue