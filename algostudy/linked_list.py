"""Singly linked lists and the classic two-pointer and reversal problems on them."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional[ListNode] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list from values and return its head, or None when there are none."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of a list in order. Raises ValueError if the list has a cycle."""
    if head is None:
        return []
    seen: set[int] = set()
    values: list[Any] = []
    for node in head:
        if id(node) in seen:
            raise ValueError("list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
    return values


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following next pointers from head ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is no cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
    return slow


def intersection(head_a: Optional[ListNode], head_b: Optional[ListNode]) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never meet."""
    p1, p2 = head_a, head_b
    while p1 is not p2:
        p1 = head_b if p1 is None else p1.next
        p2 = head_a if p2 is None else p2.next
    return p1


def nth_from_end(head: Optional[ListNode], k: int) -> ListNode:
    """Return the k-th node counted from the end (k=1 is the last node)."""
    if k < 1:
        raise IndexError("k must be at least 1")
    lead = head
    for _ in range(k):
        if lead is None:
            raise IndexError(f"list is shorter than {k} nodes")
        lead = lead.next
    trail = head
    while lead is not None:
        lead = lead.next
        trail = trail.next  # type: ignore[union-attr]
    assert trail is not None
    return trail


def remove_nth_from_end(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Unlink the k-th node from the end and return the (possibly new) head."""
    if k < 1:
        raise IndexError("k must be at least 1")
    dummy = ListNode(None, head)
    before = nth_from_end(dummy, k + 1)
    if before.next is None:
        raise IndexError(f"list is shorter than {k} nodes")
    before.next = before.next.next
    return dummy.next


def reverse_iterative(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place by walking it once; return the new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def reverse_recursive(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place recursively; return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse every full run of k nodes; a shorter tail is left as it is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    dummy = ListNode(None, head)
    group_prev = dummy
    while True:
        probe = group_prev.next
        for _ in range(k):
            if probe is None:
                return dummy.next
            probe = probe.next
        group_head = group_prev.next
        assert group_head is not None
        prev, node = probe, group_head
        while node is not probe:
            node.next, prev, node = prev, node, node.next  # type: ignore[union-attr]
        group_prev.next = prev
        group_prev = group_head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; of two middles, the second one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def reverse_first_n(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Reverse the first n nodes, keeping the rest attached; return the new head."""
    if n < 1:
        raise IndexError("n must be at least 1")
    probe = head
    for _ in range(n):
        if probe is None:
            raise IndexError(f"list is shorter than {n} nodes")
        probe = probe.next
    assert head is not None
    prev, node = probe, head
    while node is not probe:
        node.next, prev, node = prev, node, node.next  # type: ignore[union-attr]
    return prev


def reverse_between(head: Optional[ListNode], m: int, n: int) -> Optional[ListNode]:
    """Reverse the nodes at 1-based positions m..n inclusive; return the head."""
    if m < 1 or n < m:
        raise IndexError("positions must satisfy 1 <= m <= n")
    if m == 1:
        return reverse_first_n(head, n)
    before = head
    for _ in range(m - 2):
        if before is None:
            break
        before = before.next
    if before is None or before.next is None:
        raise IndexError(f"list is shorter than {m} nodes")
    before.next = reverse_first_n(before.next, n - m + 1)
    return head


def merge_two_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one; on ties the first sequence comes first."""
    return list(heapq.merge(first, second))


def merge_k_sorted(lists: Iterable[Iterable[Any]]) -> list[Any]:
    """Gather the values of all sequences and return them in ascending order."""
    heap = [value for values in lists for value in values]
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]