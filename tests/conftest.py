import pytest

GRAPH_PROBLEM = """\
Nodes:
1: (4,1)
2: (2,2)
3: (4,4)
4: (6,3)
5: (5,6)
6: (7,5)
Edges:
(2,1): 4
(3,1): 5
(1,3): 5
(2,3): 4
(3,2): 5
(4,1): 6
(1,4): 6
(4,3): 5
(3,5): 7
(5,3): 6
(4,5): 7
(5,4): 8
(6,3): 7
(3,6): 7
Origin:
2
Destinations:
5; 4
"""

MAZE = """\
S..#.
##.#.
...#.
.###E
.....
"""

CLOSED_MAZE = """\
S....
.....
.....
....#
...#E
"""

MAP_PROBLEM = """\
# small town
[NODES]
1,0,0,Home
2,3,0,Shop (Main, North)
3,3,4,Park
4,0,4,School
[WAYS]
1,1,2,Main St,3
2,2,3,High St,4
3,1,4,Side Rd,4
4,4,3,Back Ln,5
5,3,1,Diagonal,10
[META]
START,1
GOAL,3
"""


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(GRAPH_PROBLEM, encoding="utf-8")
    return path


@pytest.fixture
def maze_file(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text(MAZE, encoding="utf-8")
    return path


@pytest.fixture
def closed_maze_file(tmp_path):
    path = tmp_path / "closed.txt"
    path.write_text(CLOSED_MAZE, encoding="utf-8")
    return path


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text(MAP_PROBLEM, encoding="utf-8")
    return path
