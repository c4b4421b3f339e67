"""A plain binary search tree of integer keys that allows duplicates."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, TextIO


@dataclass(eq=False)
class BSTNode:
    """A tree node holding a key."""

    key: int
    left: Optional[BSTNode] = field(default=None, repr=False)
    right: Optional[BSTNode] = field(default=None, repr=False)


class BinarySearchTree:
    """Unbalanced search tree; equal keys go to the right subtree."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def find(self, key: int) -> Optional[BSTNode]:
        """Return the first node found holding key, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def insert(self, key: int) -> None:
        """Insert a key; duplicates are kept."""
        new_node = BSTNode(key)
        if self.root is None:
            self.root = new_node
            return
        node = self.root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def _unlink(self, parent: Optional[BSTNode], node: BSTNode) -> None:
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def delete(self, key: int) -> bool:
        """Remove one occurrence of key; return whether it was present."""
        parent: Optional[BSTNode] = None
        node = self.root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return False
        if node.left is None or node.right is None:
            self._unlink(parent, node)
            return True
        succ_parent = node
        successor = node.right
        while successor.left is not None:
            succ_parent = successor
            successor = successor.left
        node.key = successor.key
        self._unlink(succ_parent, successor)
        return True

    def update(self, old_key: int, new_key: int) -> None:
        """Remove old_key if present, then insert new_key."""
        self.delete(old_key)
        self.insert(new_key)

    def pre_order(self) -> Iterator[int]:
        """Yield keys root first, then left and right subtrees."""
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def in_order(self) -> Iterator[int]:
        """Yield keys in ascending order."""
        stack: list[BSTNode] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def post_order(self) -> Iterator[int]:
        """Yield keys with children before their parent."""
        stack = [self.root] if self.root else []
        collected: list[int] = []
        while stack:
            node = stack.pop()
            collected.append(node.key)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        yield from reversed(collected)

    def render(self) -> str:
        """Draw the tree sideways, one key per line, indented by depth."""
        lines: list[str] = []
        stack: list[tuple[BSTNode, int]] = []
        node, depth = self.root, 0
        while stack or node:
            while node:
                stack.append((node, depth))
                node, depth = node.left, depth + 1
            node, depth = stack.pop()
            lines.append("    " * depth + f"---{node.key}")
            node, depth = node.right, depth + 1
        return "\n".join(lines)


def _report(tree: BinarySearchTree, out: TextIO) -> None:
    stars = "*" * 29
    rule = "=" * 29
    out.write(f"\n{stars}\n")
    out.write("".join(f"{k}    " for k in tree.pre_order()))
    out.write(f"\n{rule}\n")
    out.write("".join(f"{k}    " for k in tree.in_order()))
    out.write(f"\n{rule}\n")
    out.write("".join(f"{k}    " for k in tree.post_order()))
    out.write(f"\n{rule}\n")
    rendered = tree.render()
    out.write(rendered + "\n" if rendered else "")
    out.write(f"\n{stars}\n")


def _read_until_zero(tokens: Iterator[str]) -> tuple[list[int], bool]:
    """Collect integers up to a 0; the flag says whether a 0 ended the run."""
    values: list[int] = []
    for token in tokens:
        try:
            value = int(token)
        except ValueError:
            return values, False
        if value == 0:
            return values, True
        values.append(value)
    return values, False


def main(argv=None) -> int:
    """Read keys to insert, then keys to delete, each run ended by 0, from stdin."""
    out = sys.stdout
    tokens = (token for line in sys.stdin for token in line.split())
    out.write("cin data:\n")
    while True:
        tree = BinarySearchTree()
        keys, more = _read_until_zero(tokens)
        for key in keys:
            tree.insert(key)
        _report(tree, out)
        if not more:
            return 0
        for token in tokens:
            try:
                key = int(token)
            except ValueError:
                return 0
            if key == 0:
                break
            tree.delete(key)
            _report(tree, out)
        else:
            return 0


if __name__ == "__main__":
    sys.exit(main())