"""
Indexed binary min-priority-queue.

A min priority queue of distinct, hashable elements associated with
(extrinsic) float priorities, implemented using a binary heap paired with a
dict from element to heap index. Unlike ``heapq``, the priority of an element
already in the queue can be lowered or raised in O(log n), which is what
Dijkstra-style relaxation needs.
"""

import math
from typing import Dict, Generic, Hashable, List, NamedTuple, Optional, TypeVar

from .common import EmptyQueueError
from .. import config

K = TypeVar("K", bound=Hashable)


class _Entry(NamedTuple):
    """Pairs an element with its associated priority."""

    key: Hashable
    priority: float


class MinPQueue(Generic[K]):
    """
    Min priority queue with O(log n) ``add_or_update`` and ``remove``.

    Class invariants:
        heap order:   heap[i].priority >= heap[(i - 1) // 2].priority for i >= 1
        index:        heap[index[e]].key == e for every queued element e,
                      and len(index) == len(heap)

    Args:
        check_invariants: Re-verify both invariants after every mutation.
            Defaults to the ``check_invariants`` setting of the global config.
    """

    def __init__(self, check_invariants: Optional[bool] = None):
        self._heap: List[_Entry] = []
        self._index: Dict[K, int] = {}
        if check_invariants is None:
            check_invariants = config.get_config().check_invariants
        self.check_invariants = check_invariants

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, key) -> bool:
        return key in self._index

    def is_empty(self) -> bool:
        """Return whether this queue contains no elements."""
        return not self._heap

    def size(self) -> int:
        """Return the number of elements contained in this queue."""
        return len(self._heap)

    def peek(self) -> K:
        """
        Return an element with the smallest priority in this queue.

        This is the element that ``remove()`` would return next (assuming no
        mutations in between).

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("peek from an empty priority queue")
        return self._heap[0].key

    def min_priority(self) -> float:
        """
        Return the smallest priority in this queue.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("min_priority of an empty priority queue")
        return self._heap[0].priority

    def priority_of(self, key: K) -> float:
        """Return the current priority of ``key``. Raises KeyError if absent."""
        return self._heap[self._index[key]].priority

    def add_or_update(self, key: K, priority: float) -> None:
        """
        Associate ``key`` with ``priority``.

        If ``key`` is already queued its priority is changed, otherwise it is
        added.

        Raises:
            ValueError: If ``priority`` is NaN.
        """
        priority = float(priority)
        if math.isnan(priority):
            raise ValueError(f"Priority of {key!r} must be a number, got NaN")

        if key in self._index:
            self._update(key, priority)
        else:
            self._add(key, priority)

        if self.check_invariants:
            self._assert_invariants()

    def remove(self) -> K:
        """
        Remove and return an element with the smallest priority.

        If multiple elements are tied for the smallest priority, an arbitrary
        one is removed.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("remove from an empty priority queue")

        root = self._heap[0].key
        del self._index[root]

        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._index[last.key] = 0
            self._bubble_down(0)

        if self.check_invariants:
            self._assert_invariants()
        return root

    def _add(self, key: K, priority: float) -> None:
        self._index[key] = len(self._heap)
        self._heap.append(_Entry(key, priority))
        self._bubble_up(len(self._heap) - 1)

    def _update(self, key: K, priority: float) -> None:
        # Only one of the two bubbles can move the entry
        i = self._index[key]
        self._heap[i] = _Entry(key, priority)
        parent = (i - 1) // 2
        if i > 0 and priority < self._heap[parent].priority:
            self._bubble_up(i)
        else:
            self._bubble_down(i)

    def _swap(self, i: int, j: int) -> None:
        """Swap the entries at heap indices ``i`` and ``j``, keeping the index in sync."""
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].key] = i
        self._index[heap[j].key] = j

    def _bubble_up(self, k: int) -> None:
        heap = self._heap
        while k > 0:
            parent = (k - 1) // 2
            if heap[k].priority >= heap[parent].priority:
                return
            self._swap(k, parent)
            k = parent

    def _bubble_down(self, k: int) -> None:
        heap = self._heap
        size = len(heap)
        child = 2 * k + 1
        while child < size:
            # Pick the smaller child
            right = child + 1
            if right < size and heap[right].priority < heap[child].priority:
                child = right

            if heap[k].priority <= heap[child].priority:
                return

            self._swap(k, child)
            k = child
            child = 2 * k + 1

    def _assert_invariants(self) -> None:
        """Raise AssertionError if heap order or index consistency is broken."""
        heap = self._heap
        if len(self._index) != len(heap):
            raise AssertionError(
                f"index size {len(self._index)} != heap size {len(heap)}"
            )
        for i, entry in enumerate(heap):
            if i > 0 and entry.priority < heap[(i - 1) // 2].priority:
                raise AssertionError(
                    f"heap order violated at {i}: {entry.priority} < parent "
                    f"{heap[(i - 1) // 2].priority}"
                )
            if self._index.get(entry.key) != i:
                raise AssertionError(
                    f"index of {entry.key!r} is {self._index.get(entry.key)}, "
                    f"but it is stored at {i}"
                )

    def __repr__(self) -> str:
        return f"MinPQueue(size={len(self._heap)})"
