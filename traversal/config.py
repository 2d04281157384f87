"""Search options and their validation."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from traversal.grid import OFFSETS, inside, inside_axes, inside_xy, manhattan, neighbours


class SearchConfigError(ValueError):
    """Invalid search options, raised before the search starts."""


class MissingOptionError(SearchConfigError):
    pass


class UnknownAlgorithmError(SearchConfigError):
    pass


@dataclass(frozen=True)
class SearchConfig:
    """Options of a single search.

    Attributes:
        start: initial node (required)
        end: target node
        end_cond: predicate(node), the search stops when it is true
            (defaults to `node == end`)
        walls: predicate or container of blocked nodes
        size: bound of a square/cube grid, every coordinate in [0, size)
        size_x, size_y, size_z: per-axis bounds, `size` wins if both are set
        nb_func: custom neighbour generator(node) -> nodes
        nb_num: neighbour count of the default generator (4, 5, 8, 9, or 6 in 3D)
        nb_cond: extra predicate every neighbour has to satisfy
        cost_fn: (current, neighbour) -> non-negative cost, defaults to 1
        heuristic: node -> non-negative estimate, only used by A*
            (defaults to the Manhattan distance to `end`, or 0)
        steps_limit: accumulated cost at which the search stops
        allow_revisits: admit neighbours without comparing costs
        side_effect: observer(node, cost, ledger, frontier) called for each
            expanded item; `ledger` is a read-only live view of the engine's
            ledger and `frontier` a tuple snapshot, neither may be kept.
            Stale items get no call, and there is no extra call with a
            None node once the frontier runs dry
    """

    start: Any = None
    end: Any = None
    end_cond: Optional[Callable[[Any], bool]] = None
    walls: Any = field(default_factory=frozenset)
    size: Optional[int] = None
    size_x: Optional[int] = None
    size_y: Optional[int] = None
    size_z: Optional[int] = None
    nb_func: Optional[Callable[[Any], Any]] = None
    nb_num: int = 4
    nb_cond: Optional[Callable[[Any], bool]] = None
    cost_fn: Optional[Callable[[Any, Any], float]] = None
    heuristic: Optional[Callable[[Any], float]] = None
    steps_limit: float = math.inf
    allow_revisits: bool = False
    side_effect: Optional[Callable[..., Any]] = None

    def __post_init__(self):
        if self.start is None:
            raise MissingOptionError("'start' is required")
        if self.nb_func is None and self.nb_num not in OFFSETS:
            raise SearchConfigError(
                f"nb_num must be one of {sorted(OFFSETS)}, got {self.nb_num!r}"
            )
        if self.size is None and (self.size_x is None) != (self.size_y is None):
            raise SearchConfigError("size_x and size_y must be given together")
        if self.steps_limit < 0:
            raise SearchConfigError("steps_limit must not be negative")

    @classmethod
    def from_options(cls, **options):
        """Build a config from keyword options, rejecting unknown names."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise SearchConfigError(f"Unknown search options: {', '.join(unknown)}")
        if options.get("start") is None:
            raise MissingOptionError("'start' is required")
        return cls(**options)

    # --- derived predicates -------------------------------------------------

    def in_bounds(self, node):
        if self.size is not None:
            return inside(self.size, node)
        if self.size_x is not None:
            if self.size_z is not None:
                return inside_axes((self.size_x, self.size_y, self.size_z), node)
            return inside_xy(self.size_x, self.size_y, node)
        return True

    def is_wall(self, node):
        if self.walls is None:
            return False
        if callable(self.walls):
            return bool(self.walls(node))
        return node in self.walls

    def accepts(self, node):
        """Combined neighbour filter: in bounds, not a wall, extra condition."""
        return (
            self.in_bounds(node)
            and not self.is_wall(node)
            and (self.nb_cond is None or bool(self.nb_cond(node)))
        )

    def is_end(self, node):
        if self.end_cond is not None:
            return bool(self.end_cond(node))
        return node == self.end

    def edge_cost(self, current, neighbour):
        if self.cost_fn is None:
            return 1
        return self.cost_fn(current, neighbour)

    def estimate(self, node):
        if self.heuristic is not None:
            return self.heuristic(node)
        if self.end is not None:
            return manhattan(node, self.end)
        return 0

    def candidates(self, node):
        """Neighbours of `node` passing the combined filter."""
        if self.nb_func is not None:
            return [nb for nb in self.nb_func(node) if self.accepts(nb)]
        return neighbours(self.nb_num, node, self.accepts)
