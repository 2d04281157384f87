import logging

import pandas as pd

from util import Graph, Node

logger = logging.getLogger(__name__)

NODE_COLUMNS = ['id', 'x', 'y', 'label']
WAY_COLUMNS = ['id', 'from', 'to', 'name', 'cost']


def split_csv_allow_commas(line, min_fields):
    parts = []
    buf = []
    depth = 0
    for ch in line:
        if ch == '(':
            depth += 1
            buf.append(ch)
        elif ch == ')':
            depth = max(depth - 1, 0)
            buf.append(ch)
        elif ch == ',':
            if depth == 0:
                parts.append("".join(buf).strip())
                buf = []
            else:
                buf.append(ch)
        else:
            buf.append(ch)
    if buf:
        parts.append("".join(buf).strip())
    if len(parts) < min_fields:
        raise ValueError(f"Line '{line}' parsed into too few fields: {parts}")
    return parts

def parse_config_file(path):
    """Parses a map file into DataFrames and search endpoints

    Args:
        path (string): Filepath to the map txt file

    Returns:
        nodes: Pandas DataFrame of nodes (index: node id, columns: x, y, label)
        ways: Pandas DataFrame of ways (columns: id, from, to, name, cost)
        start: start node id, None if the file has no START entry
        goals: list of goal node ids
    """
    section = None
    nodes = {}
    ways = []
    start = None
    goals = []

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#")

    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if ignore(line):
                continue
            if is_header(line):
                section = line.upper()
                continue

            try:
                if section == "[NODES]":
                    p = split_csv_allow_commas(line, 4)
                    nid = int(p[0])
                    nodes[nid] = {"id": nid, "x": int(p[1]), "y": int(p[2]), "label": p[3]}

                elif section == "[WAYS]":
                    p = split_csv_allow_commas(line, 5)
                    ways.append({
                        "id": int(p[0]),
                        "from": int(p[1]),
                        "to": int(p[2]),
                        "name": p[3],
                        "cost": float(p[4]),
                    })

                elif section == "[META]":
                    p = [x.strip() for x in line.split(",")]
                    key = p[0].upper()
                    if key == "START":
                        start = int(p[1])
                    elif key == "GOAL":
                        goals = [int(g) for g in p[1:] if g]
            except (ValueError, IndexError) as e:
                logger.warning("Skipping %s line '%s': %s", section, line, e)

    nodes_df = pd.DataFrame.from_dict(nodes, orient="index", columns=NODE_COLUMNS)
    nodes_df.index.name = "id"
    ways_df = pd.DataFrame(ways, columns=WAY_COLUMNS)
    return nodes_df, ways_df, start, goals


def graph_from_frames(nodes_df, ways_df, start=None, goals=()):
    """Build a Graph from the nodes/ways DataFrames."""
    graph = Graph()
    for node_id, row in nodes_df.iterrows():
        graph.add_node(Node(node_id, row['x'], row['y']))
    for _, row in ways_df.iterrows():
        cost = float(row['cost'])
        graph.add_edge(int(row['from']), int(row['to']), int(cost) if cost.is_integer() else cost)
    graph.origin = start
    graph.destinations = set(goals)
    return graph
