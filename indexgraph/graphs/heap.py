"""
Binary-heap priority queue.

Thin wrapper over heapq that orders arbitrary items by a key function and
pops items with equal keys in insertion order, so results built from it
are reproducible.
"""

import heapq
import itertools
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")


def _identity(item: Any) -> Any:
    return item


class PriorityQueue(Generic[T]):
    """
    Min-priority queue keyed by a function of each item.

    Attributes:
        key: Function mapping an item to its priority (smaller pops first).

    Complexity:
        - push: O(log n)
        - pop: O(log n)
        - peek, len: O(1)

    Example:
        >>> pq = PriorityQueue(key=lambda e: e.weight)
        >>> pq.push(Edge(0, 1, 3.0))
        >>> pq.push(Edge(0, 2, 1.0))
        >>> pq.pop()
        Edge(source=0, dest=2, weight=1.0)
    """

    def __init__(self, items: Optional[Iterable[T]] = None, key: Optional[Callable[[T], Any]] = None):
        self.key = key if key is not None else _identity
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()
        if items is not None:
            for item in items:
                self.push(item)

    def push(self, item: T) -> None:
        """Insert an item."""
        heapq.heappush(self._heap, (self.key(item), next(self._counter), item))

    def pop(self) -> T:
        """
        Remove and return the item with the smallest key.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        """
        Return the item with the smallest key without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("peek into empty priority queue")
        return self._heap[0][2]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
