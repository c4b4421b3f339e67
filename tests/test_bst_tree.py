import io
import random

import pytest

from algostudy.bst_tree import MAX_SIZE, BstTree, main

DEMO = [50, 30, 10, 0, 20, 40, 70, 90, 100, 60, 80]


@pytest.fixture
def tree():
    t = BstTree()
    for key in DEMO:
        t.insert(key)
    return t


def test_in_order_is_sorted(tree):
    assert list(tree.in_order()) == sorted(DEMO)
    assert list(tree) == sorted(DEMO)
    assert len(tree) == len(DEMO)


def test_pre_and_post_order(tree):
    assert list(tree.pre_order()) == [50, 30, 10, 0, 20, 40, 70, 60, 90, 80, 100]
    assert list(tree.post_order()) == [0, 20, 10, 40, 30, 60, 80, 100, 90, 70, 50]


def test_duplicates_ignored(tree):
    tree.insert(50)
    tree.insert(0)
    assert len(tree) == len(DEMO)
    assert list(tree.in_order()) == sorted(DEMO)


@pytest.mark.parametrize("key", [0, 10, 70, 50, 30, 100])
def test_remove_keeps_order(tree, key):
    tree.remove(key)
    remaining = sorted(k for k in DEMO if k != key)
    assert list(tree.in_order()) == remaining
    assert len(tree) == len(remaining)
    assert tree.query(key) is None


def test_remove_everything(tree):
    for key in DEMO:
        tree.remove(key)
    assert len(tree) == 0
    assert tree.root is None


def test_remove_missing_raises(tree):
    with pytest.raises(KeyError):
        tree.remove(55)
    assert len(tree) == len(DEMO)


def test_remove_from_empty_raises():
    with pytest.raises(KeyError):
        BstTree().remove(1)


def test_clear(tree):
    tree.clear()
    assert len(tree) == 0
    assert list(tree.in_order()) == []
    with pytest.raises(ValueError):
        tree.clear()


def test_query(tree):
    assert tree.query(40).data == 40
    assert tree.query(41) is None
    assert BstTree().query(1) is None


def test_min_max(tree):
    assert tree.min_node().data == min(DEMO)
    assert tree.max_node().data == max(DEMO)
    subtree = tree.query(70)
    assert tree.min_node(subtree).data == 60
    assert tree.max_node(subtree).data == 100
    with pytest.raises(ValueError):
        BstTree().min_node()


def test_parent_of(tree):
    assert tree.parent_of(10).data == 30
    assert tree.parent_of(80).data == 90
    assert tree.parent_of(50) is None
    assert tree.parent_of(12345) is None


def test_max_path_sum_small():
    t = BstTree()
    t.insert(5)
    assert t.max_path_sum() == 5
    t.insert(-10)
    assert t.max_path_sum() == 5
    t2 = BstTree()
    for key in (2, 1, 3):
        t2.insert(key)
    assert t2.max_path_sum() == 6


def test_max_path_sum_all_negative():
    t = BstTree()
    for key in (-3, -7, -1):
        t.insert(key)
    assert t.max_path_sum() == max((-3, -7, -1))


def test_max_path_sum_at_least_largest_value(tree):
    assert tree.max_path_sum() >= max(DEMO)
    with pytest.raises(ValueError):
        BstTree().max_path_sum()


def test_size_limit():
    t = BstTree()
    keys = list(range(MAX_SIZE))
    random.Random(7).shuffle(keys)
    for key in keys:
        t.insert(key)
    assert len(t) == MAX_SIZE
    with pytest.raises(OverflowError):
        t.insert(MAX_SIZE + 1)


def test_main_removes_keys(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("30\n999\n10086\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"size after removal = {len(DEMO) - 1}" in out
    assert "999 was not found" in out