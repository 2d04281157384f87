"""Package exposing the generic graph traversal and its four algorithms."""

from .common import START, LedgerEntry, reconstruct_path
from .config import MissingOptionError, SearchConfig, SearchConfigError, UnknownAlgorithmError
from .engine import ALGORITHMS, SearchResult, traverse
from .dfs import run_dfs
from .bfs import run_bfs
from .dijkstra import run_dijkstra
from .astar import run_astar

__all__ = [
    "START", "LedgerEntry", "reconstruct_path",
    "SearchConfig", "SearchConfigError", "MissingOptionError", "UnknownAlgorithmError",
    "ALGORITHMS", "SearchResult", "traverse",
    "run_dfs", "run_bfs", "run_dijkstra", "run_astar",
]
