"""A fixed-capacity binary max-heap."""

from __future__ import annotations

from typing import Any


class MaxPriorityQueue:
    """Max-heap holding at most ``capacity`` items; the largest comes out first."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._heap: list[Any] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, value: Any) -> None:
        """Add a value. Raises OverflowError when the queue is full."""
        if len(self._heap) >= self.capacity:
            raise OverflowError("priority queue is full")
        self._heap.append(value)
        self._swim(len(self._heap) - 1)

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0]

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        heap = self._heap
        heap[0], heap[-1] = heap[-1], heap[0]
        top = heap.pop()
        if heap:
            self._sink(0)
        return top

    def _swim(self, idx: int) -> None:
        heap = self._heap
        while idx > 0:
            parent = (idx - 1) // 2
            if not heap[parent] < heap[idx]:
                break
            heap[parent], heap[idx] = heap[idx], heap[parent]
            idx = parent

    def _sink(self, idx: int) -> None:
        heap = self._heap
        size = len(heap)
        while (child := 2 * idx + 1) < size:
            right = child + 1
            if right < size and heap[child] < heap[right]:
                child = right
            if heap[child] < heap[idx]:
                break
            heap[idx], heap[child] = heap[child], heap[idx]
            idx = child