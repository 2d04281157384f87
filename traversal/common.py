import math
from typing import NamedTuple, Any


class _StartMarker:
    """Predecessor recorded for the start node."""

    def __repr__(self):
        return "START"


START = _StartMarker()


class LedgerEntry(NamedTuple):
    predecessor: Any
    cost: float


def euclidean(a, b):
    """Euclidean distance between coordinate tuples a and b."""
    return math.dist(a, b)


def reconstruct_path(ledger, terminal):
    """Reconstructs the path (excluding the start node) ending at `terminal`.

    Args:
        ledger: mapping node -> LedgerEntry(predecessor, cost)
        terminal: last node of the path, or None if the search found nothing
    Returns:
        list of nodes in traversal order
    """
    path = []
    seen = set()
    current = terminal
    while current is not None and current in ledger:
        predecessor = ledger[current].predecessor
        if predecessor is START:
            break
        if current in seen:
            raise ValueError(f"Ledger contains a cycle through {current!r}")
        seen.add(current)
        path.append(current)
        current = predecessor
    path.reverse()
    return path
