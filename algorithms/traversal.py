"""
traversal.py — Graph Traversal Tracers
=======================================
BFS, DFS and Dijkstra over an undirected, weighted Graph.

Every tracer records a GraphStep at each meaningful event:
  1. A node is visited            →  `current_node` set, node appended to visited
  2. An edge joins the search tree →  `current_edge` set, edge appended to visited_edges
  3. Final step                   →  summary of the visit order / distances

Neighbours are examined in edge insertion order, which is what makes the
traces reproducible.  An unknown start node yields [].
"""

import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from graph import Edge, Graph
from algorithms.step import Step, TraceBuilder

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Step record shared by every graph tracer (see also spanning_tree.py)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphStep(Step):
    kind = "graph"

    visited_nodes: List[str]        = field(default_factory=list)
    visited_edges: List[Edge]       = field(default_factory=list)
    current_node:  Optional[str]    = None
    current_edge:  Optional[Edge]   = None
    frontier:      List[str]        = field(default_factory=list)
    distances:     Dict[str, float] = field(default_factory=dict)
    total_weight:  Optional[float]  = None


def node_name(graph: Graph, node_id: str) -> str:
    node = graph.get_node(node_id)
    return node.display if node else node_id


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
BFS_PSEUDOCODE: List[str] = [
    "def BFS(graph, source):",
    "    queue ← [source]; discovered ← {source}",
    "    while queue is not empty:",
    "        node ← queue.dequeue(); visit(node)",
    "        for neighbour in adj(node):",
    "            if neighbour not in discovered:",
    "                discovered.add(neighbour)",
    "                queue.enqueue(neighbour)",
]

DFS_PSEUDOCODE: List[str] = [
    "def DFS(graph, node):",
    "    visited.add(node)",
    "    for neighbour in adj(node):",
    "        if neighbour not in visited:",
    "            DFS(graph, neighbour)",
]

DIJKSTRA_PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",
    "    dist[v] ← ∞ for all v; dist[source] ← 0",
    "    while unvisited nodes remain:",
    "        u ← unvisited node with smallest dist",
    "        if dist[u] == ∞: break",
    "        mark u visited",
    "        for (v, w) in adj(u), v unvisited:",
    "            if dist[u] + w < dist[v]:",
    "                dist[v] ← dist[u] + w; prev[v] ← u",
]


# ---------------------------------------------------------------------------
# Breadth-first search
# ---------------------------------------------------------------------------
def bfs_steps(graph: Graph, start: str) -> List[GraphStep]:
    """
    FIFO traversal.  A node is marked *discovered* when it is enqueued,
    so it can sit in the queue at most once.
    """
    if not graph.has_node(start):
        return []

    trace      = TraceBuilder()
    queue      = deque([start])
    discovered = {start}
    visited:   List[str]  = []
    tree:      List[Edge] = []

    while queue:
        current = queue.popleft()
        visited.append(current)
        trace.add(GraphStep(
            visited_nodes=list(visited), visited_edges=list(tree),
            current_node=current, frontier=list(queue),
            explanation=f"Visiting node {node_name(graph, current)}",
        ))

        for nbr, edge in graph.neighbours(current):
            if nbr in discovered:
                continue
            discovered.add(nbr)
            queue.append(nbr)
            tree.append(edge)
            trace.add(GraphStep(
                visited_nodes=list(visited), visited_edges=list(tree),
                current_node=current, current_edge=edge, frontier=list(queue),
                explanation=f"Adding node {node_name(graph, nbr)} to queue",
            ))

    order = " → ".join(node_name(graph, n) for n in visited)
    trace.add(GraphStep(
        visited_nodes=list(visited), visited_edges=list(tree),
        explanation=f"BFS complete. Visited {len(visited)} nodes: {order}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Depth-first search
# ---------------------------------------------------------------------------
def dfs_steps(graph: Graph, start: str) -> List[GraphStep]:
    """
    Recursive-order DFS driven by an explicit stack of neighbour
    iterators: each frame resumes where its recursive call would have.
    """
    if not graph.has_node(start):
        return []

    trace   = TraceBuilder()
    seen    = {start}
    visited: List[str]  = [start]
    tree:    List[Edge] = []

    trace.add(GraphStep(
        visited_nodes=list(visited), current_node=start, frontier=[start],
        explanation=f"Visiting node {node_name(graph, start)}",
    ))

    stack = [(start, iter(graph.neighbours(start)))]
    while stack:
        node, pending = stack[-1]
        for nbr, edge in pending:
            if nbr in seen:
                continue
            tree.append(edge)
            path = [frame[0] for frame in stack]
            trace.add(GraphStep(
                visited_nodes=list(visited), visited_edges=list(tree),
                current_node=node, current_edge=edge, frontier=path,
                explanation=f"Traversing edge to node {node_name(graph, nbr)}",
            ))
            seen.add(nbr)
            visited.append(nbr)
            stack.append((nbr, iter(graph.neighbours(nbr))))
            trace.add(GraphStep(
                visited_nodes=list(visited), visited_edges=list(tree),
                current_node=nbr, frontier=path + [nbr],
                explanation=f"Visiting node {node_name(graph, nbr)}",
            ))
            break
        else:
            stack.pop()

    order = " → ".join(node_name(graph, n) for n in visited)
    trace.add(GraphStep(
        visited_nodes=list(visited), visited_edges=list(tree),
        explanation=f"DFS complete. Visited {len(visited)} nodes: {order}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
def dijkstra_steps(graph: Graph, start: str) -> List[GraphStep]:
    """
    O(V²) Dijkstra.  `visited_edges` is the current shortest-path tree:
    one edge per reached node, replaced in place when a shorter route
    to that node is found.
    """
    if not graph.has_node(start):
        return []
    if graph.has_negative_edges():
        log.warning("dijkstra rejected: graph has negative edge weights")
        return []

    trace     = TraceBuilder()
    distances: Dict[str, float] = {nid: math.inf for nid in graph.node_ids()}
    distances[start] = 0
    via:       Dict[str, Edge] = {}
    done:      List[str] = []
    done_set  = set()

    def snap(current: Optional[str], edge: Optional[Edge], explanation: str) -> GraphStep:
        return GraphStep(
            visited_nodes=list(done), visited_edges=list(via.values()),
            current_node=current, current_edge=edge,
            frontier=[n for n in graph.node_ids() if n not in done_set and distances[n] < math.inf],
            distances=dict(distances), explanation=explanation,
        )

    while len(done) < graph.node_count():
        current = None
        for nid in graph.node_ids():
            if nid not in done_set and (current is None or distances[nid] < distances[current]):
                current = nid
        if distances[current] == math.inf:
            break

        done.append(current)
        done_set.add(current)
        trace.add(snap(current, None, (
            f"Visiting node {node_name(graph, current)} with distance {distances[current]:g}"
        )))

        for nbr, edge in graph.neighbours(current):
            if nbr in done_set:
                continue
            alt = distances[current] + edge.weight
            if alt < distances[nbr]:
                distances[nbr] = alt
                via[nbr] = edge
                trace.add(snap(current, edge, (
                    f"Updating distance for node {node_name(graph, nbr)} to {alt:g}"
                )))

    unreachable = graph.node_count() - len(done)
    summary = ", ".join(
        f"{node_name(graph, n)}={distances[n]:g}" for n in graph.node_ids() if distances[n] < math.inf
    )
    explanation = f"Dijkstra complete. Shortest distances: {summary}"
    if unreachable:
        explanation += f" ({unreachable} node(s) unreachable)"
    trace.add(snap(None, None, explanation))
    return trace.build()
