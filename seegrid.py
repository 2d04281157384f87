import sys

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from search import METHODS
from util import GridReader


def plot_search(result, walls, size_x, size_y, ax=None):
    """Draw walls, visited cells and the found path of a grid search.

    Returns the matplotlib Axes the result was drawn on.
    """
    if ax is None:
        _fig, ax = plt.subplots(figsize=(max(size_x, 4) * 0.6, max(size_y, 4) * 0.6))

    # Visited cells first, walls and path drawn on top
    for (x, y) in result.visited_set:
        ax.add_patch(Rectangle((x - 0.5, y - 0.5), 1, 1, facecolor='lightblue', edgecolor='none', zorder=1))
    for (x, y) in walls:
        ax.add_patch(Rectangle((x - 0.5, y - 0.5), 1, 1, facecolor='dimgray', edgecolor='black', zorder=2))

    path = [result.start] + result.path_builder()
    if len(path) > 1:
        ax.plot([p[0] for p in path], [p[1] for p in path], color='red', linewidth=3, zorder=3)

    sx, sy = result.start
    ax.scatter(sx, sy, s=200, color='lightgreen', edgecolor='darkgreen', linewidth=2, zorder=4)
    if result.terminal_node is not None:
        tx, ty = result.terminal_node
        ax.scatter(tx, ty, s=200, facecolors='lightcoral', edgecolor='darkred', linewidth=2, zorder=4)

    ax.set_xlim(-0.5, size_x - 0.5)
    ax.set_ylim(size_y - 0.5, -0.5)  # row 0 at the top, like the input file
    ax.set_aspect('equal')
    ax.set_title(f"{result.algorithm}: steps={result.steps_taken} visited={result.count}")
    return ax


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python seegrid.py <grid file> <method>")
        sys.exit(1)

    problem = GridReader(sys.argv[1]).read_grid()
    result = METHODS[sys.argv[2].upper()](**problem.search_options())
    plot_search(result, problem.walls, problem.size_x, problem.size_y)
    plt.tight_layout()
    plt.show()
