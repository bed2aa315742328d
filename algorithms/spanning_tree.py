"""
spanning_tree.py — Minimum Spanning Tree Tracers
=================================================
Prim grows one tree from a start node; Kruskal merges a forest.
Both emit GraphStep records (see traversal.py) with `total_weight`
holding the weight of the tree built so far.
"""

from typing import Dict, List

from graph import Edge, Graph
from algorithms.step import TraceBuilder
from algorithms.traversal import GraphStep, node_name


PRIM_PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",
    "    tree ← {start}",
    "    while tree misses some node:",
    "        e ← lightest edge with exactly one end in tree",
    "        if no such edge: break",
    "        add e and its new endpoint to tree",
]

KRUSKAL_PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",
    "    sort edges by weight",
    "    for (u, v, w) in edges:",
    "        if find(u) != find(v):",
    "            union(u, v); accept (u, v)",
    "            if |accepted| == |V| - 1: break",
]


def _edge_text(graph: Graph, edge: Edge) -> str:
    return f"({node_name(graph, edge.source)}, {node_name(graph, edge.target)})"


# ---------------------------------------------------------------------------
# Prim
# ---------------------------------------------------------------------------
def prim_steps(graph: Graph, start: str) -> List[GraphStep]:
    if not graph.has_node(start):
        return []

    trace   = TraceBuilder()
    visited: List[str]  = [start]
    in_tree = {start}
    tree:    List[Edge] = []
    weight  = 0

    trace.add(GraphStep(
        visited_nodes=list(visited), current_node=start, total_weight=0,
        explanation=f"Starting at node {node_name(graph, start)}",
    ))

    while len(visited) < graph.node_count():
        best = None
        for edge in graph.edges:
            crossing = (edge.source in in_tree) != (edge.target in in_tree)
            # strict < keeps the first edge in edge order among equal weights
            if crossing and (best is None or edge.weight < best.weight):
                best = edge
        if best is None:
            break

        added = best.target if best.source in in_tree else best.source
        visited.append(added)
        in_tree.add(added)
        tree.append(best)
        weight += best.weight
        trace.add(GraphStep(
            visited_nodes=list(visited), visited_edges=list(tree),
            current_node=added, current_edge=best, total_weight=weight,
            explanation=f"Adding edge {_edge_text(graph, best)} with weight {best.weight}",
        ))

    if len(visited) < graph.node_count():
        summary = (
            f"Graph is disconnected: spanning tree covers {len(visited)} of "
            f"{graph.node_count()} nodes with total weight {weight:g}"
        )
    else:
        summary = f"Minimum spanning tree complete with {len(tree)} edges, total weight {weight:g}"
    trace.add(GraphStep(
        visited_nodes=list(visited), visited_edges=list(tree), total_weight=weight,
        explanation=summary,
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Kruskal
# ---------------------------------------------------------------------------
class DisjointSet:
    """Union–find with path compression."""

    def __init__(self, items):
        self.parent: Dict[str, str] = {x: x for x in items}

    def find(self, x: str) -> str:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets of a and b.  False if they were already one set."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self.parent[ra] = rb
        return True


def kruskal_steps(graph: Graph) -> List[GraphStep]:
    if graph.node_count() == 0:
        return []

    trace   = TraceBuilder()
    ordered = sorted(graph.edges, key=lambda e: e.weight)
    forest  = DisjointSet(graph.node_ids())
    target  = graph.node_count() - 1
    tree:    List[Edge] = []
    touched: List[str]  = []
    weight  = 0

    def touch(node_id: str) -> None:
        if node_id not in touched:
            touched.append(node_id)

    trace.add(GraphStep(
        total_weight=0,
        explanation=(
            f"Sorted {len(ordered)} edges by weight: "
            + ", ".join(f"{_edge_text(graph, e)}={e.weight}" for e in ordered)
        ),
    ))

    for edge in ordered:
        if len(tree) == target:
            break
        if forest.union(edge.source, edge.target):
            tree.append(edge)
            touch(edge.source)
            touch(edge.target)
            weight += edge.weight
            trace.add(GraphStep(
                visited_nodes=list(touched), visited_edges=list(tree),
                current_edge=edge, total_weight=weight,
                explanation=f"Adding edge {_edge_text(graph, edge)} with weight {edge.weight}",
            ))
        else:
            trace.add(GraphStep(
                visited_nodes=list(touched), visited_edges=list(tree),
                current_edge=edge, total_weight=weight,
                explanation=(
                    f"Skipping edge {_edge_text(graph, edge)} with weight {edge.weight}: "
                    f"it would form a cycle"
                ),
            ))

    if len(tree) == target:
        summary = f"Minimum spanning tree complete with {len(tree)} edges, total weight {weight:g}"
    else:
        summary = (
            f"Graph is disconnected: minimum spanning forest has {len(tree)} edges, "
            f"total weight {weight:g}"
        )
    trace.add(GraphStep(
        visited_nodes=list(touched), visited_edges=list(tree), total_weight=weight,
        explanation=summary,
    ))
    return trace.build()
