import argparse
import logging
import sys
import time
import tracemalloc

import pandas as pd
import psutil

import file_reader
from traversal import SearchConfigError, run_astar, run_bfs, run_dfs, run_dijkstra
from util import FormatBytes, GraphReader, GridReader

METHODS = {
    "DFS": run_dfs,
    "BFS": run_bfs,
    "DIJKSTRA": run_dijkstra,
    "CUS1": run_dijkstra,
    "AS": run_astar,
    "ASTAR": run_astar,
}

# one entry per distinct algorithm, for --compare
COMPARED = [("DFS", run_dfs), ("BFS", run_bfs), ("DIJKSTRA", run_dijkstra), ("AS", run_astar)]


def detect_format(filename):
    """Sniff the input kind from the first non-blank line: graph, map or grid."""
    with open(filename, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            if line.startswith("Nodes:"):
                return "graph"
            if line.upper() == "[NODES]":
                return "map"
            return "grid"
    return "grid"


def load_problem(filename):
    """Read a problem file and return the search options for it."""
    kind = detect_format(filename)
    if kind == "graph":
        graph = GraphReader(filename).read_problem()
        return graph.search_options()
    if kind == "map":
        nodes_df, ways_df, start, goals = file_reader.parse_config_file(filename)
        graph = file_reader.graph_from_frames(nodes_df, ways_df, start, goals)
        return graph.search_options()
    return GridReader(filename).read_grid().search_options()


def _execute_with_metrics(run_fn, options):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    result = run_fn(**options)
    dt = time.perf_counter() - t0
    _cur, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    rss_after = proc.memory_info().rss
    return result, dt, peak, rss_after


def full_path(result):
    """Path including the start node, empty if nothing was reached."""
    if not result.reached:
        return []
    return [result.start] + result.path_builder()


def path_cost(path, cost_fn=None):
    """Sum the edge costs along a path, one per step without a cost function."""
    if cost_fn is None:
        return max(len(path) - 1, 0)
    return sum(cost_fn(a, b) for a, b in zip(path, path[1:]))


def compare_methods(options):
    """Run every algorithm on the same problem and tabulate the outcome."""
    rows = []
    for name, run_fn in COMPARED:
        result = run_fn(**options)
        path = full_path(result)
        cost = path_cost(path, options.get("cost_fn"))
        rows.append({
            'method': name,
            'goal': result.terminal_node if result.reached else None,
            'steps': cost if result.reached else 'No Path Found',
            'visited': result.count,
            'path': " -> ".join(str(n) for n in path),
            'rank': cost if result.reached else float('inf'),
        })
    table = pd.DataFrame(rows, columns=['method', 'goal', 'steps', 'visited', 'path', 'rank'])
    table = table.sort_values(by=['rank', 'visited'], kind='stable').reset_index(drop=True)
    return table.drop(columns=['rank'])


def main(filename, method, metrics_mode="none", compare=False):
    """Main function to run the search algorithm.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the result lines
    """
    try:
        options = load_problem(filename)
        if compare:
            table = compare_methods(options)
        else:
            result, runtime_s, peak_bytes, rss_after = _execute_with_metrics(METHODS[method], options)
    except FileNotFoundError:
        print(f"Error: File not found: {filename}")
        sys.exit(1)
    except SearchConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if compare:
        print(f"{filename} COMPARE")
        print(table.to_string(index=False))
        return

    path = full_path(result)
    cost = path_cost(path, options.get("cost_fn"))

    print(f"{filename} {method}")
    if result.reached:
        print(f"Goal node reached:{result.terminal_node}")
        print(f"Number of Nodes visited:{result.count}")
        print(" -> ".join(str(n) for n in path))
        print(f"Total path cost:{cost}")
    else:
        print("None 0")

    # Metrics (printed separately so the result format remains intact)
    if metrics_mode in ("stderr", "stdout"):
        metrics_line = (
            f"Metrics: method={method} nodes_visited={result.count} "
            f"path_cost={cost if result.reached else 'N/A'} "
            f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={FormatBytes(peak_bytes)} "
            f"rss_now={FormatBytes(rss_after)}"
        )
        print(metrics_line, file=sys.stdout if metrics_mode == "stdout" else sys.stderr)


def build_parser():
    parser = argparse.ArgumentParser(description="Run a graph search on a grid, graph or map file")
    parser.add_argument('filename', help='Problem file')
    parser.add_argument('method', type=str.upper, choices=sorted(METHODS), help='Search method')
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument('--metrics', '-m', dest='metrics_mode', action='store_const', const='stderr',
                         default='none', help='Print runtime/memory metrics to stderr')
    metrics.add_argument('--metrics-stdout', dest='metrics_mode', action='store_const', const='stdout',
                         help='Print runtime/memory metrics to stdout')
    parser.add_argument('--compare', action='store_true', help='Run all algorithms and print a table')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser


if __name__ == "__main__":
    # e.g., python search.py maze.txt BFS --metrics
    args = build_parser().parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    main(args.filename, args.method, args.metrics_mode, args.compare)
