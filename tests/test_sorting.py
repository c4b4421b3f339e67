import random

import pytest

from algostudy.sorting import (
    bubble_sort,
    bucket_sort,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
)

FLOATS = [4.1, 3.2, 1.2, 12.3, 5.4, 7, 23, 0.53, 5.2, 2, 6, 7, 4]
HEAP_SAMPLE = [8, 1, 14, 3, 21, 5, 7, 10]


def _random_ints(seed, count, upper):
    rng = random.Random(seed)
    return [rng.randrange(upper) for _ in range(count)]


def test_general_sorts_floats():
    expected = sorted(FLOATS)
    assert bubble_sort(FLOATS) == expected
    assert selection_sort(FLOATS) == expected
    assert insertion_sort(FLOATS) == expected
    assert shell_sort(FLOATS) == expected
    assert merge_sort(FLOATS) == expected
    assert quick_sort(FLOATS) == expected
    assert heap_sort(FLOATS) == expected


def test_sample_ints():
    expected = sorted(HEAP_SAMPLE)
    assert bubble_sort(HEAP_SAMPLE) == expected
    assert selection_sort(HEAP_SAMPLE) == expected
    assert insertion_sort(HEAP_SAMPLE) == expected
    assert shell_sort(HEAP_SAMPLE) == expected
    assert merge_sort(HEAP_SAMPLE) == expected
    assert quick_sort(HEAP_SAMPLE) == expected
    assert heap_sort(HEAP_SAMPLE) == expected
    assert counting_sort(HEAP_SAMPLE) == expected
    assert radix_sort(HEAP_SAMPLE) == expected
    assert bucket_sort(HEAP_SAMPLE) == expected


@pytest.mark.parametrize("seed", range(5))
def test_random_ints_match_sorted(seed):
    data = _random_ints(seed, 40, 99)
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert shell_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert heap_sort(data) == expected
    assert counting_sort(data) == expected
    assert radix_sort(data) == expected
    assert bucket_sort(data) == expected


@pytest.mark.parametrize("data", [[], [7], [3, 3, 3], [2, 1]])
def test_edge_inputs(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert shell_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert heap_sort(data) == expected
    assert counting_sort(data) == expected
    assert radix_sort(data) == expected
    assert bucket_sort(data) == expected


def test_input_not_mutated():
    data = [5, 2, 9, 1]
    copy = list(data)
    results = [
        bubble_sort(data),
        selection_sort(data),
        insertion_sort(data),
        shell_sort(data),
        merge_sort(data),
        quick_sort(data),
        heap_sort(data),
        counting_sort(data),
        radix_sort(data),
        bucket_sort(data),
    ]
    assert data == copy
    assert all(result == [1, 2, 5, 9] for result in results)


def test_negative_and_reverse():
    data = list(range(10, -11, -1))
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert selection_sort(data) == expected
    assert insertion_sort(data) == expected
    assert shell_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert heap_sort(data) == expected


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = sorted(words)
    assert bubble_sort(words) == expected
    assert selection_sort(words) == expected
    assert insertion_sort(words) == expected
    assert shell_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert heap_sort(words) == expected


def test_merge_sort_is_stable():
    pairs = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __gt__(self, other):
            return self.pair[0] > other.pair[0]

    result = [k.pair for k in merge_sort(Key(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def test_counting_sort_negative_rejected():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_radix_sort_negative_rejected():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_large_values():
    data = _random_ints(11, 50, 100000)
    assert radix_sort(data) == sorted(data)


def test_bucket_sort_out_of_range():
    with pytest.raises(ValueError):
        bucket_sort([5, 100])


def test_bucket_sort_small_negatives_fit_first_bucket():
    data = [15, -3, 4, 0]
    assert bucket_sort(data) == sorted(data)