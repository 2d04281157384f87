"""Generic traversal loop shared by DFS, BFS, Dijkstra and A*.

The algorithms differ only in the frontier that decides which (node, cost)
item is expanded next. Every other step is the same:

1. pop the next item, discarding it if the ledger already holds a cheaper
   cost for that node (stale item, revisits not allowed)
2. notify the observer
3. stop when the cost reached `steps_limit` or the node satisfies the end
   condition, or when the frontier runs out
4. admit each filtered neighbour whose new cost beats its ledger cost (the
   step limit is the ceiling for nodes without an entry), overwrite its
   ledger entry and push it
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

from traversal.common import START, LedgerEntry, reconstruct_path
from traversal.config import SearchConfig, SearchConfigError, UnknownAlgorithmError
from traversal.frontier import AStarFrontier, CostFrontier, QueueFrontier, StackFrontier

logger = logging.getLogger(__name__)

ALGORITHMS = ("dfs", "bfs", "dijkstra", "a_star")


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search.

    `terminal_node` is None when the frontier was exhausted before the end
    condition held; `steps_taken` then holds the cost of the last expanded
    node. The path is only built when `path_builder()` is called.
    """

    algorithm: str
    start: Any
    terminal_node: Any
    steps_taken: float
    reached: bool
    visited_set: frozenset
    cost_map: dict
    ledger: Mapping[Any, LedgerEntry]
    final_frontier: tuple

    @property
    def count(self):
        """Number of nodes that got a ledger entry."""
        return len(self.visited_set)

    def path_builder(self):
        """Nodes after the start up to and including the terminal node."""
        return reconstruct_path(self.ledger, self.terminal_node)


def make_frontier(algorithm, config):
    if algorithm == "dfs":
        return StackFrontier()
    if algorithm == "bfs":
        return QueueFrontier()
    if algorithm == "dijkstra":
        return CostFrontier()
    if algorithm == "a_star":
        return AStarFrontier(config.estimate)
    raise UnknownAlgorithmError(f"Unknown graph algorithm: {algorithm!r}")


def traverse(algorithm: str, config: SearchConfig) -> SearchResult:
    """Run one search with the frontier selected by `algorithm`."""
    frontier = make_frontier(algorithm, config)
    logger.debug("%s search from %r to %r", algorithm, config.start, config.end)

    ledger = {config.start: LedgerEntry(START, 0)}
    ledger_view = MappingProxyType(ledger)
    frontier.push(config.start, 0)

    limit = config.steps_limit
    current = None
    steps = 0
    reached = False
    stale = 0

    while not frontier.is_empty():
        node, cost = frontier.pop_next()
        if not config.allow_revisits and cost > ledger[node].cost:
            stale += 1
            logger.debug("discarding stale item %r at cost %s (ledger %s)", node, cost, ledger[node].cost)
            continue
        steps = cost

        if config.side_effect is not None:
            config.side_effect(node, cost, ledger_view, frontier.snapshot())

        if cost >= limit:
            current = node
            break
        if config.is_end(node):
            current = node
            reached = True
            break

        for nb in config.candidates(node):
            nb_cost = cost + config.edge_cost(node, nb)
            entry = ledger.get(nb)
            ceiling = entry.cost if entry is not None else limit
            if config.allow_revisits or nb_cost < ceiling:
                ledger[nb] = LedgerEntry(node, nb_cost)
                frontier.push(nb, nb_cost)

    if current is None:
        reason = "frontier exhausted"
    elif reached:
        reason = "end reached"
    else:
        reason = "steps limit"
    logger.debug(
        "%s stopped (%s) at %r: steps=%s visited=%d stale=%d",
        algorithm, reason, current, steps, len(ledger), stale,
    )

    frozen = dict(ledger)
    return SearchResult(
        algorithm=algorithm,
        start=config.start,
        terminal_node=current,
        steps_taken=steps,
        reached=reached,
        visited_set=frozenset(frozen),
        cost_map={node: entry.cost for node, entry in frozen.items()},
        ledger=MappingProxyType(frozen),
        final_frontier=frontier.snapshot(),
    )


def build_config(config=None, **options):
    """Merge an optional SearchConfig with keyword overrides."""
    if config is None:
        return SearchConfig.from_options(**options)
    if options:
        unknown = sorted(set(options) - {f.name for f in fields(config)})
        if unknown:
            raise SearchConfigError(f"Unknown search options: {', '.join(unknown)}")
        return replace(config, **options)
    return config
