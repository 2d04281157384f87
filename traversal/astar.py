from traversal.engine import build_config, traverse


def run_astar(config=None, **options):
    """
    Performs A* search, ordering the frontier by cost + heuristic.
    Args:
        config: SearchConfig, optional when `options` hold at least `start`
        options: SearchConfig fields, overriding those of `config`
    Returns:
        SearchResult
    Without a `heuristic` the Manhattan distance to `end` is used. The result
    is only guaranteed to be the cheapest path if the heuristic never
    overestimates the remaining cost; this is not checked.
    """
    return traverse("a_star", build_config(config, **options))
