import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from traversal.common import euclidean
from traversal.grid import grid_to_point_map, grid_to_point_set

logger = logging.getLogger(__name__)


class Node:
    """Represents a node in the 2D graph."""
    def __init__(self, node_id, x, y):
        self.id = int(node_id)
        self.x = int(x)
        self.y = int(y)

    def __repr__(self):
        return f"Node {self.id}: ({self.x},{self.y})"

class Graph:
    """Represents the complete directed graph."""
    def __init__(self):
        self.nodes = {}           # {node_id: Node_object}
        self.adjacency = {}       # {from_node_id: [(to_node_id, cost), ...]}
        self.origin = None        # Origin node ID
        self.destinations = set() # Set of destination node IDs

    def add_node(self, node):
        """Adds a Node object to the graph."""
        self.nodes[node.id] = node
        if node.id not in self.adjacency:
            self.adjacency[node.id] = []

    def add_edge(self, from_id, to_id, cost):
        """Adds a directed edge and its cost."""
        self.adjacency.setdefault(from_id, []).append((to_id, cost))

    def get_coordinates(self, node_id):
        """Returns the (x, y) coordinates of a node."""
        node = self.nodes.get(node_id)
        return (node.x, node.y) if node else None

    def neighbours(self, node_id):
        """Successors of a node in ascending id order."""
        return sorted({to_id for to_id, _ in self.adjacency.get(node_id, [])})

    def edge_cost(self, from_id, to_id):
        """Cost of the cheapest edge from_id -> to_id."""
        costs = [cost for nb, cost in self.adjacency.get(from_id, []) if nb == to_id]
        if not costs:
            raise KeyError(f"No edge ({from_id},{to_id})")
        return min(costs)

    def path_cost(self, path):
        """Calculate total cost of edges in the given path, None if an edge is missing."""
        total = 0
        for from_node, to_node in zip(path, path[1:]):
            try:
                total += self.edge_cost(from_node, to_node)
            except KeyError:
                return None
        return total

    def heuristic_to(self, goals):
        """Straight-line distance to the nearest goal, for A*."""
        goal_coords = [c for c in (self.get_coordinates(g) for g in goals) if c is not None]

        def heuristic(node_id):
            coord = self.get_coordinates(node_id)
            if coord is None or not goal_coords:
                return 0
            return min(euclidean(coord, gc) for gc in goal_coords)

        return heuristic

    def search_options(self, origin=None, destinations=None):
        """Keyword options plugging this graph into the traversal engine."""
        origin = self.origin if origin is None else origin
        goals = set(self.destinations if destinations is None else destinations)
        return {
            "start": origin,
            "end_cond": goals.__contains__,
            "nb_func": self.neighbours,
            "cost_fn": self.edge_cost,
            "heuristic": self.heuristic_to(goals),
        }


class GraphReader:
    """Handles parsing the graph problem file.

    Format:
        Nodes:
        1: (4,1)
        Edges:
        (2,1): 4
        Origin:
        2
        Destinations:
        5; 4
    """

    def __init__(self, filename):
        self.filename = filename
        self.graph = Graph()

    def read_problem(self):
        """Reads the file and populates the Graph object."""
        with open(self.filename, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f if line.strip()]

        current_section = None

        for line in lines:
            # Determining which section of the file its currently reading
            if line.startswith("Nodes:"):
                current_section = "NODES"
                continue
            elif line.startswith("Edges:"):
                current_section = "EDGES"
                continue
            elif line.startswith("Origin:"):
                current_section = "ORIGIN"
                rest = line[len("Origin:"):].strip()
                if not rest:
                    continue
                line = rest
            elif line.startswith("Destinations:"):
                current_section = "DESTINATIONS"
                rest = line[len("Destinations:"):].strip()
                if not rest:
                    continue
                line = rest

            try:
                self._parse_line(current_section, line)
            except (ValueError, IndexError) as e:
                logger.warning("Error parsing %s line '%s': %s", current_section, line, e)

        return self.graph

    def _parse_line(self, section, line):
        if section == "NODES":
            # Example: 1: (4,1)
            node_id, coords_str = line.split(':', 1)
            x, y = map(int, coords_str.strip().strip('()').split(','))
            self.graph.add_node(Node(node_id.strip(), x, y))
        elif section == "EDGES":
            # Example: (2,1): 4
            nodes_str, cost_str = line.split(':', 1)
            from_id, to_id = map(int, nodes_str.strip().strip('()').split(','))
            self.graph.add_edge(from_id, to_id, _number(cost_str.strip()))
        elif section == "ORIGIN":
            self.graph.origin = int(line)
        elif section == "DESTINATIONS":
            # Example: 5; 4
            self.graph.destinations.update(int(d.strip()) for d in line.split(';') if d.strip())
        else:
            raise ValueError("line outside of any section")


def _number(text):
    value = float(text)
    return int(value) if value.is_integer() else value


@dataclass(frozen=True)
class GridProblem:
    """A character grid turned into search inputs."""
    walls: frozenset
    start: Optional[Tuple[int, int]]
    end: Optional[Tuple[int, int]]
    size_x: int
    size_y: int

    def search_options(self):
        return {
            "start": self.start,
            "end": self.end,
            "walls": self.walls,
            "size_x": self.size_x,
            "size_y": self.size_y,
        }


class GridReader:
    """Parses a character grid: walls, one start and one end character."""

    def __init__(self, filename, wall='#', start='S', end='E'):
        self.filename = filename
        self.wall = wall
        self.start = start
        self.end = end

    def read_grid(self):
        with open(self.filename, 'r', encoding='utf-8') as f:
            lines = f.read().strip('\n').split('\n')
        return parse_grid(lines, self.wall, self.start, self.end)


def parse_grid(lines, wall='#', start='S', end='E'):
    """Build a GridProblem from rows of characters."""
    lines = [line.rstrip('\r') for line in lines]
    markers = grid_to_point_map(lines, {start, end})
    found = {ch: pt for pt, ch in markers.items()}
    return GridProblem(
        walls=frozenset(grid_to_point_set(lines, wall)),
        start=found.get(start),
        end=found.get(end),
        size_x=max((len(line) for line in lines), default=0),
        size_y=len(lines),
    )


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
