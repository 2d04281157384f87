from traversal.engine import build_config, traverse


def run_dijkstra(config=None, **options):
    """
    Dijkstra's algorithm - uninformed cheapest path search.
    Args:
        config: SearchConfig, optional when `options` hold at least `start`
        options: SearchConfig fields, overriding those of `config`
    Returns:
        SearchResult
    Costs returned by `cost_fn` must not be negative.
    """
    return traverse("dijkstra", build_config(config, **options))
