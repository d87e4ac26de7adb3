"""Binary-heap priority queue ordered by the values' ``<``."""

from __future__ import annotations

from typing import Any


class PriorityQueue:
    """Priority queue whose head is the element that sorts first under ``<``."""

    def __init__(self) -> None:
        self._heap: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` to the queue."""
        self._heap.append(value)
        self._up(len(self._heap) - 1)

    def pop(self) -> Any:
        """Remove and return the head of the queue."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        last = len(self._heap) - 1
        self._swap(0, last)
        self._down(0, last)
        return self._heap.pop()

    def peek(self) -> Any:
        """Return the head of the queue without removing it."""
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0]

    def release(self, value: Any) -> None:
        """Remove the first element equal to ``value``; do nothing if absent."""
        index = next(
            (i for i, item in enumerate(self._heap) if item == value), None
        )
        if index is None:
            return
        last = len(self._heap) - 1
        if index != last:
            self._swap(index, last)
            if not self._down(index, last):
                self._up(index)
        self._heap.pop()

    def values(self) -> list[Any]:
        """Return the elements in heap order."""
        return list(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i] < self._heap[j]

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, start: int, n: int) -> bool:
        i = start
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            right = child + 1
            if right < n and self._less(right, child):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child
        return i > start