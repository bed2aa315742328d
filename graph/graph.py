"""
graph.py — Graph Container
===========================
Single source of truth for the graph the tracers walk.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Adjacency queries                      (neighbours, get_edge_between, …)
  3. Import from adjacency-list text        (text → graph)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges keep insertion order.  Tracers iterate neighbours in
    edge insertion order, which fixes tie-breaking and makes every trace
    reproducible.
  - Edges are undirected; `_adj[node_id] → [edge_index, …]` is rebuilt
    whenever the edge list changes shape, so neighbour queries are
    O(degree), not O(E).
  - Adding an edge between an already-connected pair updates that edge's
    weight in place (same position), as the graph editor does.
  - Edges must reference existing nodes; self-loops are rejected.
"""

import math
from typing import Dict, Iterator, List, Optional, Tuple

from graph.node import Node
from graph.edge import Edge


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}   (insertion ordered)
        edges : [Edge]            (insertion ordered)
        _adj  : {node_id: [index into edges, …]}
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.edges: List[Edge]      = []
        self._adj:  Dict[str, List[int]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, x: float, y: float, label: Optional[str] = None, node_id: Optional[str] = None) -> Node:
        """Convenience: create + add in one call.  Ids default to "1", "2", …"""
        nid = node_id or str(len(self.nodes) + 1)
        if label is None:
            label = _letter(len(self.nodes))
        return self.add_node(Node(id=nid, x=x, y=y, label=label))

    def remove_node(self, node_id: str) -> None:
        if node_id not in self.nodes:
            return
        del self.nodes[node_id]
        self.edges = [e for e in self.edges if not e.touches(node_id)]
        self._reindex()

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        if edge.source == edge.target:
            raise ValueError(f"Self-loop on node '{edge.source}' is not allowed")
        for end in (edge.source, edge.target):
            if end not in self.nodes:
                raise ValueError(f"Edge {edge} references unknown node '{end}'")

        for i, existing in enumerate(self.edges):
            if existing.connects(edge.source, edge.target):
                updated = Edge(existing.source, existing.target, edge.weight)
                self.edges[i] = updated
                return updated

        self.edges.append(edge)
        idx = len(self.edges) - 1
        self._adj[edge.source].append(idx)
        self._adj[edge.target].append(idx)
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight))

    def remove_edge(self, source: str, target: str) -> None:
        self.edges = [e for e in self.edges if not e.connects(source, target)]
        self._reindex()

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        for idx in self._adj.get(a, []):
            if self.edges[idx].connects(a, b):
                return self.edges[idx]
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] in edge insertion order."""
        result = []
        for idx in self._adj.get(node_id, []):
            edge = self.edges[idx]
            result.append((edge.other_end(node_id), edge))
        return result

    def reachable_from(self, node_id: str) -> set:
        """Set of node ids connected to node_id (including itself)."""
        if node_id not in self.nodes:
            return set()
        seen  = {node_id}
        stack = [node_id]
        while stack:
            for nbr, _ in self.neighbours(stack.pop()):
                if nbr not in seen:
                    seen.add(nbr)
                    stack.append(nbr)
        return seen

    def is_connected(self) -> bool:
        if not self.nodes:
            return True
        first = next(iter(self.nodes))
        return len(self.reachable_from(first)) == len(self.nodes)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ---------- Import from Adjacency List (text) ----------
    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        canvas_w: float = 800,
        canvas_h: float = 400,
    ) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A connects to B, C, D  (weight 1)
            A: B(3) C(7)        → A–B weight 3, A–C weight 7
            A -> B(3), C(7)     → alternate arrow syntax

        Node ids are the labels themselves; nodes are laid out in a circle.
        """
        adjacency: Dict[str, List[Tuple[str, float]]] = {}

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            for sep in (":", "->", "→"):
                if sep in line:
                    src, rest = (part.strip() for part in line.split(sep, 1))
                    break
            else:
                continue

            adjacency.setdefault(src, [])
            for token in rest.replace(",", " ").split():
                tgt, weight = _parse_target(token)
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, weight))

        g = cls()
        for (x, y), label in zip(circle_layout(len(adjacency), canvas_w / 2, canvas_h / 2,
                                               min(canvas_w, canvas_h) * 0.35), adjacency):
            g.add_node(Node(id=label, x=x, y=y, label=label))

        for src, targets in adjacency.items():
            for tgt, weight in targets:
                if src != tgt and g.get_edge_between(src, tgt) is None:
                    g.create_edge(src, tgt, weight=weight)
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"

    def _reindex(self) -> None:
        self._adj = {nid: [] for nid in self.nodes}
        for idx, e in enumerate(self.edges):
            self._adj[e.source].append(idx)
            self._adj[e.target].append(idx)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def circle_layout(count: int, cx: float, cy: float, radius: float) -> List[Tuple[float, float]]:
    """`count` evenly spaced points on a circle, starting at angle 0."""
    return [
        (cx + radius * math.cos(2 * math.pi * i / count),
         cy + radius * math.sin(2 * math.pi * i / count))
        for i in range(count)
    ]


def _letter(index: int) -> str:
    """0 → "A", 25 → "Z", 26 → "AA", …"""
    label = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        label = chr(65 + rem) + label
    return label


def _parse_target(token: str) -> Tuple[str, float]:
    """"B(3)" → ("B", 3); "B" → ("B", 1)."""
    if "(" in token and token.endswith(")"):
        name, w_str = token[:-1].split("(", 1)
        try:
            weight = float(w_str)
        except ValueError:
            weight = 1.0
        return name, int(weight) if weight.is_integer() else weight
    return token, 1
