# algostudy

Classic data structures and algorithms in plain Python, using only the
standard library.

## Contents

- `algostudy.bst_tree`: `BstTree`, a binary search tree of integers without
  duplicates, holding at most 32767 nodes (`insert` raises `OverflowError`
  beyond that). It supports `len()`, iteration in ascending order,
  `pre_order`, `in_order`, `post_order`, `query`, `remove` (raises `KeyError`
  for a missing value), `clear`, `min_node`, `max_node`, `parent_of` and
  `max_path_sum`.
- `algostudy.binary_search_tree`: `BinarySearchTree`, an unbalanced search tree
  that keeps duplicate keys (they go right), with `find`, `insert`, `delete`,
  `update`, the three traversals and `render`, which draws the tree sideways.
- `algostudy.avl`: `AVLTree`, a self-balancing tree supporting `in`, `insert`,
  `delete`, `update`, the three traversals and `render`.
- `algostudy.priority_queue`: `MaxPriorityQueue`, a fixed-capacity max-heap
  with `push` (raises `OverflowError` when full), `peek`, `pop` and `len()`.
- `algostudy.cache`: `LRUCache` (least recently used eviction) and `LFUCache`
  (least frequently used eviction, ties go to the oldest entry; a size of 0
  stores nothing). Both offer `put`, `get` (raises `KeyError` on a miss), `in`,
  `len()` and `items()`; `LFUCache` also has `frequency`.
- `algostudy.sorting`: `bubble_sort`, `selection_sort`, `insertion_sort`,
  `shell_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `counting_sort`,
  `radix_sort` and `bucket_sort`. Each returns a new ascending list. Counting
  and radix sort take non-negative integers only; bucket sort takes integers
  from 0 to 99.
- `algostudy.linked_list`: `ListNode`, `from_values`, `to_values`, `has_cycle`,
  `detect_cycle`, `intersection`, `nth_from_end`, `remove_nth_from_end`,
  `reverse_iterative`, `reverse_recursive`, `reverse_k_group`, `middle_node`,
  `reverse_first_n`, `reverse_between`, `merge_two_sorted` and `merge_k_sorted`.
- `algostudy.binary_tree`: `TreeNode`, `max_depth`,
  `build_from_preorder_inorder`, `build_from_inorder_postorder`, `flatten`,
  `connect`, `preorder_values`, `invert`, `kth_smallest`,
  `convert_to_greater_tree`, `diameter`, `find_duplicate_subtrees`,
  `construct_maximum_tree` and `render`.
- `algostudy.array_problems`: `two_sum_pairs`, `max_profit`, `candy`,
  `erase_overlap_intervals`, `min_arrow_shots`, `find_content_children`,
  `can_place_flowers`, `partition_labels` and `reconstruct_queue`.
- `algostudy.dynamic`: coin change three ways (`coin_change_recursive`,
  `coin_change_memo`, `coin_change`, each returning -1 when the amount cannot
  be made), `min_coins` (raises `ValueError` instead), Fibonacci three ways
  (`fib_memo`, `fib_dp`, `fib`), `permutations`, `length_of_lis` and
  `max_subarray_sum`.
- `algostudy.recursion`: `factorial`, `fibonacci` and `step_up`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algostudy.cache import LRUCache

cache = LRUCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.put("c", 3)          # "a" is evicted
assert "a" not in cache
assert cache.get("c") == 3
```

```python
from algostudy.linked_list import from_values, reverse_iterative, to_values

head = from_values([1, 2, 3])
assert to_values(reverse_iterative(head)) == [3, 2, 1]
```

```python
from algostudy.dynamic import coin_change, fib

assert coin_change([1, 2, 5], 11) == 3
assert fib(20) == 6765
```

## Command-line demos

```
algostudy-bst
algostudy-avl [KEY ...]
algostudy-search-tree
```

- `algostudy-bst` builds a sample tree from 50, 30, 10, 0, 20, 40, 70, 90, 100,
  60 and 80, prints its three traversals, then removes each integer read from
  standard input, printing the size and the in-order values after each one.
  It stops at 10086, at the end of input or at anything that is not an integer.
- `algostudy-avl` inserts the keys given as arguments (1 to 7 when none are
  given) into an AVL tree and prints it sideways.
- `algostudy-search-tree` reads integers from standard input to insert until a
  0, prints the tree, then reads integers to delete until the next 0, printing
  the tree after each deletion, and starts over with a new tree.

## Limits

The demos are plain line-oriented programs: there is no interactive menu and
nothing is saved between runs. The trees and caches live in memory only.