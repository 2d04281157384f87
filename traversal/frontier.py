"""Frontier containers deciding which (node, cost) item is expanded next.

The four variants differ only in ordering:

- StackFrontier: last in, first out (DFS)
- QueueFrontier: first in, first out (BFS)
- CostFrontier: lowest accumulated cost first (Dijkstra)
- AStarFrontier: lowest cost + heuristic first (A*)

Priority frontiers never remove or re-key items. Pushing a node again with a
lower cost simply adds a second item; the engine discards the stale one when
it is popped.
"""
import heapq
import itertools
from collections import deque


class Frontier:
    """Common interface of all frontier variants."""

    def push(self, node, cost):
        raise NotImplementedError

    def pop_next(self):
        """Remove and return the next (node, cost) item."""
        raise NotImplementedError

    def is_empty(self):
        return len(self) == 0

    def snapshot(self):
        """Tuple of the pending (node, cost) items, in storage order."""
        raise NotImplementedError

    def __len__(self):
        raise NotImplementedError


class StackFrontier(Frontier):
    def __init__(self):
        self._items = []

    def push(self, node, cost):
        self._items.append((node, cost))

    def pop_next(self):
        return self._items.pop()

    def snapshot(self):
        return tuple(self._items)

    def __len__(self):
        return len(self._items)


class QueueFrontier(Frontier):
    def __init__(self):
        self._items = deque()

    def push(self, node, cost):
        self._items.append((node, cost))

    def pop_next(self):
        return self._items.popleft()

    def snapshot(self):
        return tuple(self._items)

    def __len__(self):
        return len(self._items)


class CostFrontier(Frontier):
    """Min-heap keyed by accumulated cost."""

    def __init__(self):
        self._heap = []
        # tie breaker, nodes themselves need not be orderable
        self._counter = itertools.count()

    def _priority(self, node, cost):
        return cost

    def push(self, node, cost):
        heapq.heappush(self._heap, (self._priority(node, cost), next(self._counter), node, cost))

    def pop_next(self):
        _priority, _cnt, node, cost = heapq.heappop(self._heap)
        return node, cost

    def snapshot(self):
        return tuple((node, cost) for _p, _c, node, cost in self._heap)

    def __len__(self):
        return len(self._heap)


class AStarFrontier(CostFrontier):
    """Min-heap keyed by f = g + h.

    The heuristic has to be admissible for the first path found to the end to
    be the cheapest one. An overestimating heuristic is not detected.
    """

    def __init__(self, heuristic):
        super().__init__()
        self.heuristic = heuristic

    def _priority(self, node, cost):
        return cost + self.heuristic(node)
