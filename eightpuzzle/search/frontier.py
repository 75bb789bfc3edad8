from __future__ import annotations
from typing import List, Tuple
import heapq
import itertools

from eightpuzzle.search.node import SearchTree

TIE_BREAKS = ("h", "g", "fifo", "lifo")


class Frontier:
    """
    Open list of node indices ordered by f = g + h.

    tie_break:
      h    - smaller h first
      g    - larger g first
      fifo - older first
      lifo - newer first
    An insertion counter closes every tie, so pop order is reproducible.
    """

    def __init__(self, tree: SearchTree, tie_break: str = "h") -> None:
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}; choose from {TIE_BREAKS}")
        self.tree = tree
        self.tie_break = tie_break
        self._heap: List[Tuple[Tuple[int, int, int], int]] = []
        self._counter = itertools.count()
        self.peak = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def _key(self, idx: int) -> Tuple[int, int, int]:
        n = self.tree[idx]
        ctr = next(self._counter)
        if self.tie_break == "h":    return (n.priority, n.h, ctr)
        if self.tie_break == "g":    return (n.priority, -n.g, ctr)
        if self.tie_break == "fifo": return (n.priority, 0, ctr)
        return (n.priority, 0, -ctr)

    def push(self, idx: int) -> None:
        heapq.heappush(self._heap, (self._key(idx), idx))
        if len(self._heap) > self.peak:
            self.peak = len(self._heap)

    def pop(self) -> int:
        _, idx = heapq.heappop(self._heap)
        return idx

    def clear(self) -> None:
        self._heap.clear()
