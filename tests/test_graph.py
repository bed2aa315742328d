"""Tests for the graph model and the template factories."""

import pytest

from graph import TEMPLATES, Edge, Graph, Node, build_template, default_graph, random_graph


def small_graph():
    g = Graph()
    for nid, label in (("1", "A"), ("2", "B"), ("3", "C")):
        g.add_node(Node(id=nid, x=0, y=0, label=label))
    g.create_edge("1", "2", 4)
    g.create_edge("1", "3", 2)
    return g


class TestNodeEdge:
    """Value objects."""

    def test_node_display_falls_back_to_id(self):
        assert Node(id="7", x=0, y=0).display == "7"
        assert Node(id="7", x=0, y=0, label="G").display == "G"

    def test_create_node_assigns_ids_and_letters(self):
        g = Graph()
        a = g.create_node(10, 10)
        b = g.create_node(20, 20)
        assert (a.id, a.display, b.id, b.display) == ("1", "A", "2", "B")

    def test_edge_is_undirected(self):
        e = Edge("1", "2", 5)
        assert e.connects("2", "1")
        assert e.other_end("2") == "1"
        assert e.other_end("9") is None

    def test_edge_serialises_from_to(self):
        assert Edge("1", "2", 5).to_dict() == {"from": "1", "to": "2", "weight": 5}

    def test_edge_from_dict_keeps_integral_weights_int(self):
        e = Edge.from_dict({"from": "1", "to": "2", "weight": "3"})
        assert e.weight == 3
        assert isinstance(e.weight, int)


class TestGraphEdges:
    """Edge CRUD and validation."""

    def test_self_loop_rejected(self):
        g = small_graph()
        with pytest.raises(ValueError):
            g.create_edge("1", "1")

    def test_unknown_endpoint_rejected(self):
        g = small_graph()
        with pytest.raises(ValueError):
            g.create_edge("1", "9")

    def test_duplicate_pair_updates_weight_in_place(self):
        g = small_graph()
        g.create_edge("2", "1", 9)
        assert g.edge_count() == 2
        assert g.edges[0].weight == 9
        assert (g.edges[0].source, g.edges[0].target) == ("1", "2")

    def test_neighbours_in_insertion_order(self):
        g = small_graph()
        assert [nbr for nbr, _ in g.neighbours("1")] == ["2", "3"]

    def test_remove_node_drops_incident_edges(self):
        g = small_graph()
        g.remove_node("1")
        assert g.edge_count() == 0
        assert g.neighbours("2") == []

    def test_remove_edge(self):
        g = small_graph()
        g.remove_edge("3", "1")
        assert g.get_edge_between("1", "3") is None
        assert g.get_edge_between("1", "2") is not None


class TestGraphSerialisation:
    """to_dict / from_dict and adjacency-list import."""

    def test_dict_round_trip(self):
        g = default_graph()
        again = Graph.from_dict(g.to_dict())
        assert again.to_dict() == g.to_dict()

    def test_adjacency_list_import(self):
        g = Graph.from_adjacency_list("A: B(3) C\nB -> C(2)\n# comment")
        assert sorted(g.node_ids()) == ["A", "B", "C"]
        assert g.edge_count() == 3
        assert g.get_edge_between("A", "B").weight == 3
        assert g.get_edge_between("A", "C").weight == 1

    def test_adjacency_list_ignores_repeated_pairs(self):
        g = Graph.from_adjacency_list("A: B(3)\nB: A(5)")
        assert g.edge_count() == 1
        assert g.get_edge_between("A", "B").weight == 3


class TestTemplates:
    """Ready-made graphs."""

    def test_default_graph_shape(self):
        g = default_graph()
        assert g.node_count() == 6
        assert g.edge_count() == 7
        assert [n.display for n in g] == ["A", "B", "C", "D", "E", "F"]

    @pytest.mark.parametrize("name", sorted(TEMPLATES))
    def test_every_template_is_connected(self, name):
        g = build_template(name, seed=3)
        assert g.node_count() >= 3
        assert g.is_connected()
        assert all(1 <= e.weight <= 9 for e in g.edges)

    @pytest.mark.parametrize("name", sorted(TEMPLATES))
    def test_same_seed_same_graph(self, name):
        assert build_template(name, seed=11).to_dict() == build_template(name, seed=11).to_dict()

    def test_template_sizes(self):
        assert build_template("grid").edge_count() == 12
        assert build_template("complete").edge_count() == 15
        assert build_template("bipartite").edge_count() == 9
        assert build_template("wheel").edge_count() == 14
        assert build_template("tree").edge_count() == 6

    def test_unknown_template(self):
        with pytest.raises(KeyError):
            build_template("hexagon")


class TestRandomGraph:
    """Ring-plus-chords random graphs, checked structurally."""

    @pytest.mark.parametrize("seed", range(5))
    def test_connected_with_requested_edges(self, seed):
        g = random_graph(seed=seed)
        assert g.node_count() == 8
        assert g.edge_count() == 12
        assert g.is_connected()

    def test_edge_count_capped_at_complete_graph(self):
        g = random_graph(num_nodes=4, num_edges=50, seed=1)
        assert g.edge_count() == 6

    def test_too_few_nodes(self):
        with pytest.raises(ValueError):
            random_graph(num_nodes=2)
