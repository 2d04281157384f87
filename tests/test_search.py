"""Tests for the command-line runner."""

import pytest

import search


class TestDetectFormat:

    def test_kinds(self, graph_file, maze_file, map_file):
        assert search.detect_format(graph_file) == "graph"
        assert search.detect_format(maze_file) == "grid"
        assert search.detect_format(map_file) == "map"

    def test_load_problem_options(self, graph_file, map_file, maze_file):
        assert search.load_problem(graph_file)["start"] == 2
        assert search.load_problem(map_file)["start"] == 1
        assert search.load_problem(maze_file)["end"] == (4, 3)


class TestMain:

    def test_grid_output(self, maze_file, capsys):
        search.main(str(maze_file), "BFS")
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f"{maze_file} BFS"
        assert lines[1] == "Goal node reached:(4, 3)"
        assert lines[2].startswith("Number of Nodes visited:")
        assert lines[3].startswith("(0, 0) -> (1, 0) -> (2, 0)")
        assert lines[3].endswith("(4, 4) -> (4, 3)")
        assert lines[4] == "Total path cost:13"

    def test_graph_output(self, graph_file, capsys):
        search.main(str(graph_file), "CUS1")
        out = capsys.readouterr().out
        assert "Goal node reached:4" in out
        assert "2 -> 1 -> 4" in out
        assert "Total path cost:10" in out

    def test_no_path(self, closed_maze_file, capsys):
        search.main(str(closed_maze_file), "AS")
        lines = capsys.readouterr().out.splitlines()
        assert lines == [f"{closed_maze_file} AS", "None 0"]

    def test_metrics(self, maze_file, capsys):
        search.main(str(maze_file), "DFS", metrics_mode="stdout")
        out = capsys.readouterr().out
        assert "Metrics: method=DFS" in out
        assert "runtime_ms=" in out

    def test_metrics_to_stderr(self, maze_file, capsys):
        search.main(str(maze_file), "DIJKSTRA", metrics_mode="stderr")
        captured = capsys.readouterr()
        assert "Metrics:" not in captured.out
        assert "Metrics: method=DIJKSTRA" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            search.main(str(tmp_path / "missing.txt"), "BFS")
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().out

    def test_path_cost_follows_printed_path(self, tmp_path, capsys):
        """BFS reaches 4 through a stale branch; the cost shown is the printed path's."""
        problem = tmp_path / "detour.txt"
        problem.write_text(
            "Nodes:\n1: (0,0)\n2: (2,0)\n3: (1,1)\n4: (3,0)\n"
            "Edges:\n(1,2): 5\n(1,3): 1\n(3,2): 1\n(2,4): 1\n"
            "Origin:\n1\nDestinations:\n4\n",
            encoding="utf-8",
        )
        search.main(str(problem), "BFS", metrics_mode="stdout")
        out = capsys.readouterr().out
        assert "1 -> 3 -> 2 -> 4" in out
        assert "Total path cost:3" in out
        assert "path_cost=3 " in out

    def test_missing_start(self, tmp_path, capsys):
        problem = tmp_path / "nostart.txt"
        problem.write_text("...\n..E\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            search.main(str(problem), "BFS")
        assert exc.value.code == 1
        assert capsys.readouterr().out.startswith("Error: 'start' is required")

    def test_missing_origin_in_compare(self, tmp_path, capsys):
        problem = tmp_path / "noorigin.txt"
        problem.write_text("Nodes:\n1: (0,0)\n2: (1,0)\nEdges:\n(1,2): 1\nDestinations:\n2\n",
                           encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            search.main(str(problem), "BFS", compare=True)
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().out


class TestCompare:

    def test_table(self, maze_file):
        table = search.compare_methods(search.load_problem(maze_file))
        assert set(table['method']) == {"DFS", "BFS", "DIJKSTRA", "AS"}
        assert list(table['steps']) == [13, 13, 13, 13]

    def test_unreachable_rows(self, closed_maze_file):
        table = search.compare_methods(search.load_problem(closed_maze_file))
        assert list(table['steps']) == ["No Path Found"] * 4

    def test_compare_output(self, maze_file, capsys):
        search.main(str(maze_file), "BFS", compare=True)
        out = capsys.readouterr().out
        assert out.splitlines()[0] == f"{maze_file} COMPARE"
        for name in ("DFS", "BFS", "DIJKSTRA", "AS"):
            assert name in out

    def test_path_cost(self):
        weights = {(1, 3): 1, (3, 2): 1, (2, 4): 1}
        assert search.path_cost([1, 3, 2, 4], lambda a, b: weights[(a, b)]) == 3
        assert search.path_cost([(0, 0), (1, 0), (1, 1)]) == 2
        assert search.path_cost([]) == 0


class TestParser:

    def test_method_is_case_insensitive(self):
        args = search.build_parser().parse_args(["maze.txt", "as", "--metrics"])
        assert args.method == "AS"
        assert args.metrics_mode == "stderr"
        assert not args.compare

    def test_unknown_method(self):
        with pytest.raises(SystemExit) as exc:
            search.build_parser().parse_args(["maze.txt", "GBFS"])
        assert exc.value.code == 2
