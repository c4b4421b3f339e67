"""A self-balancing AVL tree of integer keys."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional

_DEMO_KEYS = (1, 2, 3, 4, 5, 6, 7)


@dataclass(eq=False)
class AVLNode:
    """A tree node; a leaf has height 0."""

    key: int
    height: int = 0
    left: Optional[AVLNode] = field(default=None, repr=False)
    right: Optional[AVLNode] = field(default=None, repr=False)


def _height(node: Optional[AVLNode]) -> int:
    return -1 if node is None else node.height


def _refresh(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _refresh(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1:
        assert node.left is not None
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """AVL tree without duplicate keys."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def insert(self, key: int) -> None:
        """Insert a key; an existing key is left as it is."""
        self.root = self._insert(self.root, key)

    def _insert(self, node: Optional[AVLNode], key: int) -> AVLNode:
        if node is None:
            return AVLNode(key)
        if key == node.key:
            return node
        if key < node.key:
            node.left = self._insert(node.left, key)
        else:
            node.right = self._insert(node.right, key)
        return _rebalance(node)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def delete(self, key: int) -> bool:
        """Remove a key; return whether it was present."""
        self.root, removed = self._delete(self.root, key)
        return removed

    def _delete(self, node: Optional[AVLNode], key: int) -> tuple[Optional[AVLNode], bool]:
        if node is None:
            return None, False
        if key == node.key:
            if node.right is None:
                return node.left, True
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            node.right, removed = self._delete(node.right, successor.key)
        elif key < node.key:
            node.left, removed = self._delete(node.left, key)
        else:
            node.right, removed = self._delete(node.right, key)
        return _rebalance(node), removed

    def update(self, old_key: int, new_key: int) -> bool:
        """Replace old_key with new_key; return False if old_key was absent."""
        if not self.delete(old_key):
            return False
        self.insert(new_key)
        return True

    def pre_order(self) -> Iterator[int]:
        """Yield keys root first, then left and right subtrees."""

        def walk(node: Optional[AVLNode]) -> Iterator[int]:
            if node is not None:
                yield node.key
                yield from walk(node.left)
                yield from walk(node.right)

        return walk(self.root)

    def in_order(self) -> Iterator[int]:
        """Yield keys in ascending order."""

        def walk(node: Optional[AVLNode]) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield node.key
                yield from walk(node.right)

        return walk(self.root)

    def post_order(self) -> Iterator[int]:
        """Yield keys with children before their parent."""

        def walk(node: Optional[AVLNode]) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.key

        return walk(self.root)

    def render(self) -> str:
        """Draw the tree sideways, one key per line, indented by depth."""
        lines: list[str] = []

        def walk(node: Optional[AVLNode], depth: int) -> None:
            if node is None:
                return
            walk(node.left, depth + 1)
            lines.append("    " * depth + f"---{node.key}")
            walk(node.right, depth + 1)

        walk(self.root, 0)
        return "\n".join(lines)


def main(argv=None) -> int:
    """Insert the given keys (1 to 7 by default) and print the tree sideways."""
    args = sys.argv[1:] if argv is None else argv
    keys = [int(arg) for arg in args] if args else list(_DEMO_KEYS)
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    print(tree.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())