#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SeedWeaver v0.1.0

Min-priority queue over vertex identifiers.

Backed by heapq. Each entry carries a monotonically increasing insertion
sequence number, so equal priorities pop in insertion order and vertex
identifiers never need to be compared with each other. There is no
decrease-key: re-prioritisation is done by draining and re-inserting.

Author: SeedWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import heapq
import math
from typing import Any, Hashable, Iterator, List, Tuple


class MinPriorityQueue:
    """
    Binary min-heap with deterministic FIFO tie-breaking.

    Time Complexity:
    - push: O(log n)
    - pop: O(log n)
    - peek / peek_priority: O(1)
    - len: O(1)
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Any]] = []
        self._sequence = 0

    def push(self, item: Hashable, priority: float) -> None:
        """
        Insert an item with the given priority (lower pops first).

        Args:
            item: Vertex identifier
            priority: Finite real priority

        Raises:
            ValueError: If priority is NaN or infinite
        """
        priority = float(priority)
        if not math.isfinite(priority):
            raise ValueError(f"Priority must be finite, got {priority} for {item!r}")
        heapq.heappush(self._heap, (priority, self._sequence, item))
        self._sequence += 1

    def pop(self) -> Hashable:
        """
        Remove and return the item with the smallest priority.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        _, _, item = heapq.heappop(self._heap)
        return item

    def peek(self) -> Hashable:
        """Return the minimum item without removing it."""
        if not self._heap:
            raise IndexError("peek at empty priority queue")
        return self._heap[0][2]

    def peek_priority(self) -> float:
        """Return the minimum priority in O(1)."""
        if not self._heap:
            raise IndexError("peek at empty priority queue")
        return self._heap[0][0]

    def drain(self) -> List[Hashable]:
        """Pop every item, returning them in priority order."""
        items = []
        while self._heap:
            items.append(self.pop())
        return items

    def __iter__(self) -> Iterator[Hashable]:
        # Non-destructive, priority order
        for _, _, item in sorted(self._heap):
            yield item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: Hashable) -> bool:
        return any(entry[2] == item for entry in self._heap)

    def __repr__(self) -> str:
        return f"MinPriorityQueue(size={len(self._heap)})"

# SeedWeaver v0.1.0
# Any usage is subject to this software's license.
