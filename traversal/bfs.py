from traversal.engine import build_config, traverse


def run_bfs(config=None, **options):
    """Breadth-First Search: expands nodes in the order they were admitted.

    With unit costs the first path found to the end is a shortest one.
    """
    return traverse("bfs", build_config(config, **options))
