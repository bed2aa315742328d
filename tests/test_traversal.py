"""Tests for BFS, DFS and Dijkstra traces over the graph model."""

import pytest

from graph import Graph, Node, default_graph, random_graph
from algorithms.traversal import bfs_steps, dfs_steps, dijkstra_steps


def labels(graph, ids):
    return [graph.get_node(i).display for i in ids]


def two_islands():
    g = Graph()
    for nid in "1234":
        g.add_node(Node(id=nid, x=0, y=0))
    g.create_edge("1", "2", 1)
    g.create_edge("3", "4", 1)
    return g


class TestBFS:
    """Breadth-first traces."""

    def test_visit_order_on_default_graph(self):
        g = default_graph()
        steps = bfs_steps(g, "1")
        assert labels(g, steps[-1].visited_nodes) == ["A", "B", "D", "C", "E", "F"]
        assert len(steps) == 12
        assert steps[-1].explanation.startswith("BFS complete")

    def test_tree_edges_one_per_discovered_node(self):
        g = default_graph()
        last = bfs_steps(g, "1")[-1]
        assert len(last.visited_edges) == g.node_count() - 1

    def test_queue_never_holds_duplicates(self):
        for step in bfs_steps(random_graph(seed=4), "1"):
            assert len(step.frontier) == len(set(step.frontier))

    @pytest.mark.parametrize("seed", range(5))
    def test_visits_each_reachable_node_once(self, seed):
        g = random_graph(seed=seed)
        visited = bfs_steps(g, "1")[-1].visited_nodes
        assert len(visited) == len(set(visited)) == len(g.reachable_from("1"))

    def test_only_reachable_component(self):
        assert bfs_steps(two_islands(), "1")[-1].visited_nodes == ["1", "2"]

    def test_unknown_start(self):
        assert bfs_steps(default_graph(), "42") == []

    def test_identical_input_identical_trace(self):
        assert bfs_steps(default_graph(), "1") == bfs_steps(default_graph(), "1")


class TestDFS:
    """Depth-first traces."""

    def test_visit_order_on_default_graph(self):
        g = default_graph()
        steps = dfs_steps(g, "1")
        assert labels(g, steps[-1].visited_nodes) == ["A", "B", "C", "F", "E", "D"]
        assert len(steps) == 12

    def test_traverse_step_precedes_visit(self):
        steps = dfs_steps(default_graph(), "1")
        assert steps[1].explanation == "Traversing edge to node B"
        assert steps[2].explanation == "Visiting node B"
        assert steps[2].current_node == "2"

    @pytest.mark.parametrize("seed", range(5))
    def test_visits_each_reachable_node_once(self, seed):
        g = random_graph(seed=seed)
        visited = dfs_steps(g, "1")[-1].visited_nodes
        assert len(visited) == len(set(visited)) == len(g.reachable_from("1"))

    def test_unknown_start(self):
        assert dfs_steps(default_graph(), "42") == []


class TestDijkstra:
    """Shortest-path traces."""

    def test_distances_on_default_graph(self):
        last = dijkstra_steps(default_graph(), "1")[-1]
        assert last.distances == {"1": 0, "2": 4, "3": 7, "4": 5, "5": 6, "6": 9}

    def test_shortest_path_tree(self):
        g = default_graph()
        last = dijkstra_steps(g, "1")[-1]
        assert len(last.visited_edges) == g.node_count() - 1
        assert g.get_edge_between("5", "6") in last.visited_edges
        assert g.get_edge_between("3", "6") not in last.visited_edges

    def test_nodes_finalised_in_distance_order(self):
        last = dijkstra_steps(default_graph(), "1")[-1]
        dists = [last.distances[n] for n in last.visited_nodes]
        assert dists == sorted(dists)

    def test_unreachable_nodes_serialise_as_null(self):
        last = dijkstra_steps(two_islands(), "1")[-1]
        assert last.to_dict()["distances"]["3"] is None
        assert "unreachable" in last.explanation

    def test_negative_weight_rejected(self):
        g = default_graph()
        g.create_edge("1", "2", -1)
        assert dijkstra_steps(g, "1") == []

    def test_unknown_start(self):
        assert dijkstra_steps(default_graph(), "42") == []
