"""Tests for the four frontier orderings."""

from traversal.frontier import AStarFrontier, CostFrontier, QueueFrontier, StackFrontier


def drain(frontier):
    items = []
    while not frontier.is_empty():
        items.append(frontier.pop_next())
    return items


class TestFrontiers:

    def test_stack_is_lifo(self):
        f = StackFrontier()
        for i, node in enumerate("abc"):
            f.push(node, i)
        assert len(f) == 3
        assert drain(f) == [("c", 2), ("b", 1), ("a", 0)]

    def test_queue_is_fifo(self):
        f = QueueFrontier()
        for i, node in enumerate("abc"):
            f.push(node, i)
        assert f.snapshot() == (("a", 0), ("b", 1), ("c", 2))
        assert drain(f) == [("a", 0), ("b", 1), ("c", 2)]

    def test_cost_frontier_pops_cheapest(self):
        f = CostFrontier()
        f.push("far", 9)
        f.push("near", 1)
        f.push("mid", 4)
        assert [node for node, _ in drain(f)] == ["near", "mid", "far"]

    def test_cost_frontier_keeps_duplicates(self):
        """Re-pushing a node adds a second item instead of re-keying."""
        f = CostFrontier()
        f.push("x", 10)
        f.push("x", 2)
        assert len(f) == 2
        assert drain(f) == [("x", 2), ("x", 10)]

    def test_unorderable_nodes(self):
        """Equal priorities never compare the nodes themselves."""
        f = CostFrontier()
        f.push(object(), 1)
        f.push(object(), 1)
        assert len(drain(f)) == 2

    def test_astar_orders_by_cost_plus_heuristic(self):
        h = {"a": 10, "b": 0, "c": 3}
        f = AStarFrontier(h.get)
        f.push("a", 1)   # f = 11
        f.push("b", 5)   # f = 5
        f.push("c", 4)   # f = 7
        assert drain(f) == [("b", 5), ("c", 4), ("a", 1)]

    def test_empty(self):
        for f in (StackFrontier(), QueueFrontier(), CostFrontier(), AStarFrontier(lambda n: 0)):
            assert f.is_empty()
            assert f.snapshot() == ()
