"""Binary tree nodes and the classic recursive problems on them."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; ``next`` links a node to its right neighbour on its level."""

    val: Any
    left: Optional[TreeNode] = field(default=None, repr=False)
    right: Optional[TreeNode] = field(default=None, repr=False)
    next: Optional[TreeNode] = field(default=None, repr=False)


def _walk_pre(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _walk_in(root: Optional[TreeNode], reverse: bool = False) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right if reverse else node.left
        node = stack.pop()
        yield node
        node = node.left if reverse else node.right


def _depths(root: Optional[TreeNode]) -> Iterator[tuple[TreeNode, int, int]]:
    """Yield (node, left depth, right depth) with children before parents."""
    depth: dict[int, int] = {}
    stack: list[tuple[TreeNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            for child in (node.right, node.left):
                if child is not None:
                    stack.append((child, False))
            continue
        left = depth.pop(id(node.left), 0) if node.left is not None else 0
        right = depth.pop(id(node.right), 0) if node.right is not None else 0
        depth[id(node)] = max(left, right) + 1
        yield node, left, right


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    best = 0
    for node, left, right in _depths(root):
        if node is root:
            best = max(left, right) + 1
    return best


def build_from_preorder_inorder(
    preorder: Sequence[Any], inorder: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild a tree from its pre-order and in-order value sequences."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals must have the same length")

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> Optional[TreeNode]:
        if pre_start > pre_end:
            return None
        root_val = preorder[pre_start]
        try:
            index = list(inorder[in_start:in_end + 1]).index(root_val) + in_start
        except ValueError:
            raise ValueError(f"value {root_val!r} missing from in-order sequence") from None
        left_size = index - in_start
        return TreeNode(
            root_val,
            build(pre_start + 1, pre_start + left_size, in_start, index - 1),
            build(pre_start + left_size + 1, pre_end, index + 1, in_end),
        )

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def build_from_inorder_postorder(
    inorder: Sequence[Any], postorder: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild a tree from its in-order and post-order value sequences."""
    if len(inorder) != len(postorder):
        raise ValueError("traversals must have the same length")

    def build(in_start: int, in_end: int, post_start: int, post_end: int) -> Optional[TreeNode]:
        if in_start > in_end:
            return None
        root_val = postorder[post_end]
        index = next(
            (idx for idx in range(in_end, in_start - 1, -1) if inorder[idx] == root_val),
            None,
        )
        if index is None:
            raise ValueError(f"value {root_val!r} missing from in-order sequence")
        left_size = index - in_start
        return TreeNode(
            root_val,
            build(in_start, index - 1, post_start, post_start + left_size - 1),
            build(index + 1, in_end, post_start + left_size, post_end - 1),
        )

    return build(0, len(inorder) - 1, 0, len(postorder) - 1)


def flatten(root: Optional[TreeNode]) -> None:
    """Turn the tree in place into a right-linked chain in pre-order."""
    nodes = list(_walk_pre(root))
    for node, following in zip(nodes, nodes[1:] + [None]):
        node.left = None
        node.right = following


def connect(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Point each node's ``next`` at its right neighbour on the same level."""
    level = [root] if root is not None else []
    while level:
        for node, neighbour in zip(level, level[1:]):
            node.next = neighbour
        level = [child for node in level for child in (node.left, node.right) if child]
    return root


def preorder_values(root: Optional[TreeNode]) -> list[Any]:
    """Return the values in pre-order."""
    return [node.val for node in _walk_pre(root)]


def invert(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        node.left, node.right = node.right, node.left
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root


def kth_smallest(root: Optional[TreeNode], k: int) -> Any:
    """Return the k-th smallest value (1-based) of a binary search tree."""
    if k >= 1:
        for rank, node in enumerate(_walk_in(root), start=1):
            if rank == k:
                return node.val
    raise IndexError(f"tree has no {k}-th smallest value")


def convert_to_greater_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace each value of a search tree with the sum of all values not smaller."""
    total = 0
    for node in _walk_in(root, reverse=True):
        total += node.val
        node.val = total
    return root


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    return max((left + right for _, left, right in _depths(root)), default=0)


def find_duplicate_subtrees(root: Optional[TreeNode]) -> list[TreeNode]:
    """Return one root for each subtree shape and value layout seen more than once."""
    seen: Counter[str] = Counter()
    found: list[TreeNode] = []

    def serialize(node: Optional[TreeNode]) -> str:
        if node is None:
            return "#"
        key = f"{node.val!r},{serialize(node.left)},{serialize(node.right)}"
        seen[key] += 1
        if seen[key] == 2:
            found.append(node)
        return key

    serialize(root)
    return found


def construct_maximum_tree(nums: Sequence[Any]) -> Optional[TreeNode]:
    """Build the tree rooted at the maximum whose subtrees come from each side of it."""
    if not nums:
        return None
    top = max(range(len(nums)), key=nums.__getitem__)
    return TreeNode(
        nums[top],
        construct_maximum_tree(nums[:top]),
        construct_maximum_tree(nums[top + 1:]),
    )


def render(root: Optional[TreeNode]) -> str:
    """Draw the tree sideways, one value per line, indented by depth."""
    lines: list[str] = []
    stack: list[tuple[TreeNode, int]] = []
    node, depth = root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        lines.append("    " * depth + f"---{node.val}")
        node, depth = node.right, depth + 1
    return "\n".join(lines)