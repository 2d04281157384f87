from traversal.engine import build_config, traverse


def run_dfs(config=None, **options):
    """Depth-First Search: expands the most recently admitted node first.

    The returned steps are the cost of the path found, which is not
    necessarily the cheapest one.
    """
    return traverse("dfs", build_config(config, **options))
