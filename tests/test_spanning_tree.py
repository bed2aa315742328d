"""Tests for the Prim and Kruskal minimum spanning tree traces."""

import pytest

from graph import Graph, Node, default_graph, random_graph
from algorithms.spanning_tree import DisjointSet, kruskal_steps, prim_steps


def has_cycle(node_ids, edges):
    forest = DisjointSet(node_ids)
    return not all(forest.union(e.source, e.target) for e in edges)


class TestDisjointSet:
    """Union-find helper."""

    def test_union_and_find(self):
        ds = DisjointSet("abcd")
        assert ds.union("a", "b")
        assert ds.union("c", "d")
        assert not ds.union("b", "a")
        assert ds.find("a") == ds.find("b")
        assert ds.find("a") != ds.find("c")


class TestPrim:
    """Prim grows one tree from the start node."""

    def test_default_graph_weight(self):
        last = prim_steps(default_graph(), "1")[-1]
        assert last.total_weight == 16
        assert len(last.visited_edges) == 5

    def test_first_step_is_start(self):
        first = prim_steps(default_graph(), "1")[0]
        assert first.current_node == "1"
        assert first.total_weight == 0

    def test_disconnected_graph_is_reported(self):
        g = Graph()
        for nid in "123":
            g.add_node(Node(id=nid, x=0, y=0))
        g.create_edge("1", "2", 3)
        last = prim_steps(g, "1")[-1]
        assert "disconnected" in last.explanation
        assert last.visited_nodes == ["1", "2"]

    def test_unknown_start(self):
        assert prim_steps(default_graph(), "x") == []


class TestKruskal:
    """Kruskal merges a forest in weight order."""

    def test_default_graph_weight(self):
        steps = kruskal_steps(default_graph())
        assert steps[-1].total_weight == 16
        assert len(steps) == 7          # sorted edges, five accepts, summary

    def test_matches_prim_total(self):
        for seed in range(5):
            g = random_graph(seed=seed)
            assert kruskal_steps(g)[-1].total_weight == prim_steps(g, "1")[-1].total_weight

    @pytest.mark.parametrize("seed", range(8))
    def test_at_most_v_minus_1_edges_and_acyclic(self, seed):
        g = random_graph(num_nodes=7, num_edges=14, seed=seed)
        last = kruskal_steps(g)[-1]
        assert len(last.visited_edges) <= g.node_count() - 1
        assert not has_cycle(g.node_ids(), last.visited_edges)

    def test_cycle_edge_is_skipped(self):
        g = Graph()
        for nid in "1234":
            g.add_node(Node(id=nid, x=0, y=0))
        for a, b, w in [("1", "2", 1), ("2", "3", 2), ("1", "3", 3), ("3", "4", 4)]:
            g.create_edge(a, b, w)
        steps = kruskal_steps(g)
        assert "would form a cycle" in steps[3].explanation
        assert [e.weight for e in steps[-1].visited_edges] == [1, 2, 4]

    def test_accepted_weights_non_decreasing(self):
        last = kruskal_steps(random_graph(seed=9))[-1]
        weights = [e.weight for e in last.visited_edges]
        assert weights == sorted(weights)

    def test_empty_graph(self):
        assert kruskal_steps(Graph()) == []
