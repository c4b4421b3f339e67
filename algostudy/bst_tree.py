"""An unbalanced binary search tree of integers with a size limit."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional

MAX_SIZE = 32767
EXIT_KEY = 10086
_DEMO_KEYS = (50, 30, 10, 0, 20, 40, 70, 90, 100, 60, 80)


@dataclass(eq=False)
class Node:
    """A tree node holding an integer."""

    data: int
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)


class BstTree:
    """Binary search tree without duplicates, holding at most MAX_SIZE nodes."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return self.in_order()

    def insert(self, data: int) -> None:
        """Insert a value; duplicates are ignored. Raises OverflowError when full."""
        if self._size == MAX_SIZE:
            raise OverflowError("insert node error, the size of the tree is max")
        if self.root is None:
            self.root = Node(data)
            self._size += 1
            return
        node = self.root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = Node(data)
                    self._size += 1
                    return
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = Node(data)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def _pre_order_nodes(self) -> Iterator[Node]:
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            yield node
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def _in_order_nodes(self) -> Iterator[Node]:
        stack: list[Node] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _post_order_nodes(self) -> Iterator[Node]:
        stack = [self.root] if self.root else []
        collected: list[Node] = []
        while stack:
            node = stack.pop()
            collected.append(node)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        yield from reversed(collected)

    def pre_order(self) -> Iterator[int]:
        """Yield values root first, then left and right subtrees."""
        return (node.data for node in self._pre_order_nodes())

    def in_order(self) -> Iterator[int]:
        """Yield values in ascending order."""
        return (node.data for node in self._in_order_nodes())

    def post_order(self) -> Iterator[int]:
        """Yield values with children before their parent."""
        return (node.data for node in self._post_order_nodes())

    def query(self, key: int) -> Optional[Node]:
        """Return the node holding key, or None."""
        node = self.root
        while node is not None and node.data != key:
            node = node.left if key < node.data else node.right
        return node

    def remove(self, data: int) -> None:
        """Remove a value. Raises KeyError if the tree is empty or lacks it."""
        if self.root is None:
            raise KeyError(f"remove node error, root = null ({data})")
        parent: Optional[Node] = None
        target = self.root
        while target is not None and target.data != data:
            parent = target
            target = target.left if data < target.data else target.right
        if target is None:
            raise KeyError(f"remove node error, {data} was not found")

        if target.left is not None and target.right is not None:
            succ_parent = target
            successor = target.right
            while successor.left is not None:
                succ_parent = successor
                successor = successor.left
            target.data = successor.data
            if succ_parent.left is successor:
                succ_parent.left = successor.right
            else:
                succ_parent.right = successor.right
        else:
            child = target.left if target.left is not None else target.right
            if parent is None:
                self.root = child
            elif parent.left is target:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def clear(self) -> None:
        """Remove every node. Raises ValueError if the tree is already empty."""
        if self.root is None:
            raise ValueError("remove all failed, root = null")
        self.root = None
        self._size = 0

    def min_node(self, node: Optional[Node] = None) -> Node:
        """Return the smallest node under node (the root by default)."""
        node = self._start(node)
        while node.left is not None:
            node = node.left
        return node

    def max_node(self, node: Optional[Node] = None) -> Node:
        """Return the largest node under node (the root by default)."""
        node = self._start(node)
        while node.right is not None:
            node = node.right
        return node

    def _start(self, node: Optional[Node]) -> Node:
        node = node if node is not None else self.root
        if node is None:
            raise ValueError("tree is empty")
        return node

    def parent_of(self, key: int) -> Optional[Node]:
        """Return the parent of the node holding key; None for the root or a missing key."""
        parent: Optional[Node] = None
        node = self.root
        while node is not None:
            if key == node.data:
                return parent
            parent = node
            node = node.left if key < node.data else node.right
        return None

    def max_path_sum(self) -> int:
        """Return the largest sum of values along any path between two nodes."""
        if self.root is None:
            raise ValueError("tree is empty")
        gains: dict[int, int] = {}
        best: Optional[int] = None
        for node in self._post_order_nodes():
            left = max(0, gains.get(id(node.left), 0)) if node.left else 0
            right = max(0, gains.get(id(node.right), 0)) if node.right else 0
            through = left + right + node.data
            best = through if best is None else max(best, through)
            gains[id(node)] = max(left, right) + node.data
        assert best is not None
        return best


def _format(values: Iterator[int]) -> str:
    return "".join(f"{value},   " for value in values)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv=None) -> int:
    """Build a sample tree, print its traversals, then delete keys read from stdin."""
    tree = BstTree()
    for key in _DEMO_KEYS:
        tree.insert(key)

    print("pre-order")
    print(_format(tree.pre_order()))
    print("in-order")
    print(_format(tree.in_order()))
    print("post-order")
    print(_format(tree.post_order()))
    print(f"deleting nodes, enter {EXIT_KEY} to stop")

    for token in _tokens(sys.stdin):
        try:
            key = int(token)
        except ValueError:
            break
        if key == EXIT_KEY:
            break
        try:
            tree.remove(key)
        except KeyError as exc:
            print(exc.args[0])
        print(f"size after removal = {len(tree)}")
        print(f"in-order after removal: {_format(tree.in_order())}")
        print()

    if tree.root is not None:
        tree.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())