#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
frontiers.py
------------
Open-set containers: IndexedMinHeap for the single-frontier strategies,
DistanceHeap for the BMSSP base case.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, List, Tuple


class IndexedMinHeap:
    """
    Binary min-heap over hashable items with an item -> slot index, so
    membership is O(1) and decrease-key is O(log n).

    Ordering is (key(item), first-insertion sequence): equal keys pop FIFO,
    and an item keeps its original sequence number across update() calls.
    """

    def __init__(self, key: Callable[[Any], Any]):
        self.key = key
        self.h: List[Tuple[Any, int, Any]] = []
        self.pos: Dict[Hashable, int] = {}
        self.counter = 0  # tie-breaker for stability

    def __len__(self) -> int:
        return len(self.h)

    def __bool__(self) -> bool:
        return bool(self.h)

    def __contains__(self, item) -> bool:
        return item in self.pos

    def push(self, item) -> None:
        """Insert `item`; if already present behaves like update()."""
        if item in self.pos:
            self.update(item)
            return
        self.counter += 1
        self.h.append((self.key(item), self.counter, item))
        self.pos[item] = len(self.h) - 1
        self._sift_up(len(self.h) - 1)

    def update(self, item) -> None:
        """Re-read key(item) after the caller changed it (either direction)."""
        i = self.pos[item]
        _, seq, _ = self.h[i]
        self.h[i] = (self.key(item), seq, item)
        self._sift_up(i)
        self._sift_down(self.pos[item])

    def peek(self):
        return self.h[0][2]

    def pop(self):
        last = self.h.pop()
        if not self.h:
            del self.pos[last[2]]
            return last[2]
        top = self.h[0]
        self.h[0] = last
        self.pos[last[2]] = 0
        del self.pos[top[2]]
        self._sift_down(0)
        return top[2]

    # ------------------------------- internals ------------------------------- #

    def _less(self, i: int, j: int) -> bool:
        a, b = self.h[i], self.h[j]
        return (a[0], a[1]) < (b[0], b[1])

    def _swap(self, i: int, j: int) -> None:
        self.h[i], self.h[j] = self.h[j], self.h[i]
        self.pos[self.h[i][2]] = i
        self.pos[self.h[j][2]] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        n = len(self.h)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i
            if left < n and self._less(left, smallest):
                smallest = left
            if right < n and self._less(right, smallest):
                smallest = right
            if smallest == i:
                break
            self._swap(i, smallest)
            i = smallest


class DistanceHeap:
    """
    Binary min-heap of (item, dist) pairs with an item -> slot index.

    Only the stored distance is compared, with no secondary tie-breaker:
    sifting up stops at a parent with an equal or smaller distance, sifting
    down swaps only with a strictly smaller child (the right child only when it
    is strictly smaller than the left). Equal distances therefore pop in heap
    order, not insertion order.
    """

    def __init__(self):
        self.h: List[List[Any]] = []  # [dist, item]
        self.pos: Dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self.h)

    def __bool__(self) -> bool:
        return bool(self.h)

    def __contains__(self, item) -> bool:
        return item in self.pos

    def push(self, item, dist) -> None:
        self.h.append([dist, item])
        self.pos[item] = len(self.h) - 1
        self._bubble_up(len(self.h) - 1)

    def decrease_key(self, item, dist) -> None:
        """Lower the stored distance of `item`; a larger or equal value is ignored."""
        i = self.pos[item]
        if dist < self.h[i][0]:
            self.h[i][0] = dist
            self._bubble_up(i)

    def pop(self) -> Tuple[Any, Any]:
        """Remove and return (item, stored dist) of the root."""
        top = self.h[0]
        end = self.h.pop()
        del self.pos[top[1]]
        if self.h:
            self.h[0] = end
            self.pos[end[1]] = 0
            self._bubble_down(0)
        return top[1], top[0]

    # ------------------------------- internals ------------------------------- #

    def _place(self, i: int, entry: List[Any]) -> None:
        self.h[i] = entry
        self.pos[entry[1]] = i

    def _bubble_up(self, n: int) -> None:
        entry = self.h[n]
        while n > 0:
            parent_idx = (n - 1) // 2
            parent = self.h[parent_idx]
            if entry[0] >= parent[0]:
                break
            self._place(parent_idx, entry)
            self._place(n, parent)
            n = parent_idx

    def _bubble_down(self, n: int) -> None:
        length = len(self.h)
        entry = self.h[n]
        while True:
            right = (n + 1) * 2
            left = right - 1
            swap = None
            if left < length and self.h[left][0] < entry[0]:
                swap = left
            if right < length:
                limit = entry[0] if swap is None else self.h[left][0]
                if self.h[right][0] < limit:
                    swap = right
            if swap is None:
                break
            self._place(n, self.h[swap])
            self._place(swap, entry)
            n = swap
