"""
templates.py — Ready-made Graphs
=================================
Factory functions for the graphs the editor offers out of the box.

  default_graph()      – six nodes A–F in two rows, fixed weights
  cycle / star / grid / tree / complete / bipartite / wheel / ladder
  random_graph()       – ring backbone + extra random chords

Every factory accepts `rng` (a random.Random) or `seed` so that a layout
with random weights can be reproduced exactly.  Random weights are drawn
from 1–9 inclusive.  Node ids are "1", "2", … and labels are letters.
"""

import random
from typing import Callable, Dict, Optional

from graph.graph import Graph, circle_layout
from graph.node import Node

WEIGHT_LOW  = 1
WEIGHT_HIGH = 9

CENTER_X = 400
CENTER_Y = 200


def _pick_rng(rng: Optional[random.Random], seed: Optional[int]) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def _weight(rng: random.Random) -> int:
    return rng.randint(WEIGHT_LOW, WEIGHT_HIGH)


def _ring_nodes(g: Graph, count: int, radius: float, first_id: int = 1, first_letter: int = 0) -> None:
    for i, (x, y) in enumerate(circle_layout(count, CENTER_X, CENTER_Y, radius)):
        g.add_node(Node(id=str(first_id + i), x=x, y=y, label=chr(65 + first_letter + i)))


# ---------------------------------------------------------------------------
# Fixed example
# ---------------------------------------------------------------------------
def default_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Graph:
    """The starter graph: A B C on top, D E F below."""
    g = Graph()
    positions = [(100, 100), (250, 100), (400, 100), (100, 250), (250, 250), (400, 250)]
    for i, (x, y) in enumerate(positions):
        g.add_node(Node(id=str(i + 1), x=x, y=y, label=chr(65 + i)))
    for a, b, w in [("1", "2", 4), ("2", "3", 3), ("1", "4", 5), ("2", "5", 2),
                    ("3", "6", 6), ("4", "5", 4), ("5", "6", 3)]:
        g.create_edge(a, b, weight=w)
    return g


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------
def cycle_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None, size: int = 8) -> Graph:
    rng = _pick_rng(rng, seed)
    g = Graph()
    _ring_nodes(g, size, 140)
    for i in range(size):
        g.create_edge(str(i + 1), str((i + 1) % size + 1), weight=_weight(rng))
    return g


def star_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None, spokes: int = 7) -> Graph:
    rng = _pick_rng(rng, seed)
    g = Graph()
    g.add_node(Node(id="1", x=CENTER_X, y=CENTER_Y, label="A"))
    _ring_nodes(g, spokes, 120, first_id=2, first_letter=1)
    for i in range(spokes):
        g.create_edge("1", str(i + 2), weight=_weight(rng))
    return g


def grid_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Graph:
    """3 × 3 lattice; horizontal edges first, then vertical."""
    rng = _pick_rng(rng, seed)
    g = Graph()
    for i in range(9):
        g.add_node(Node(id=str(i + 1), x=220 + 80 * (i % 3), y=120 + 80 * (i // 3), label=chr(65 + i)))
    for i in range(9):
        if i % 3 < 2:
            g.create_edge(str(i + 1), str(i + 2), weight=_weight(rng))
    for i in range(6):
        g.create_edge(str(i + 1), str(i + 4), weight=_weight(rng))
    return g


def tree_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Graph:
    """Complete binary tree of depth 2.  Weights are fixed."""
    g = Graph()
    positions = [(400, 80), (280, 180), (520, 180), (220, 300), (340, 300), (460, 300), (580, 300)]
    for i, (x, y) in enumerate(positions):
        g.add_node(Node(id=str(i + 1), x=x, y=y, label=chr(65 + i)))
    for child in range(2, 8):
        g.create_edge(str(child // 2), str(child), weight=child)
    return g


def complete_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None, size: int = 6) -> Graph:
    rng = _pick_rng(rng, seed)
    g = Graph()
    _ring_nodes(g, size, 120)
    for i in range(size):
        for j in range(i + 1, size):
            g.create_edge(str(i + 1), str(j + 1), weight=_weight(rng))
    return g


def bipartite_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Graph:
    """K(3,3) with fixed weights."""
    g = Graph()
    for i in range(3):
        g.add_node(Node(id=str(i + 1), x=300, y=120 + i * 80, label=chr(65 + i)))
    for i in range(3):
        g.add_node(Node(id=str(i + 4), x=500, y=120 + i * 80, label=chr(68 + i)))
    weights = iter([2, 3, 4, 5, 6, 7, 8, 9, 1])
    for left in ("1", "2", "3"):
        for right in ("4", "5", "6"):
            g.create_edge(left, right, weight=next(weights))
    return g


def wheel_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None, spokes: int = 7) -> Graph:
    """Star plus a rim joining consecutive spokes."""
    rng = _pick_rng(rng, seed)
    g = star_graph(rng=rng, spokes=spokes)
    for i in range(spokes):
        g.create_edge(str(i + 2), str((i + 1) % spokes + 2), weight=_weight(rng))
    return g


def ladder_graph(rng: Optional[random.Random] = None, seed: Optional[int] = None, rungs: int = 6) -> Graph:
    """Two rails of `rungs` nodes: rungs first, then left rail, then right rail."""
    rng = _pick_rng(rng, seed)
    g = Graph()
    for i in range(rungs):
        g.add_node(Node(id=str(i + 1), x=300, y=100 + i * 40, label=chr(65 + i)))
    for i in range(rungs):
        g.add_node(Node(id=str(i + rungs + 1), x=500, y=100 + i * 40, label=chr(65 + rungs + i)))
    for i in range(rungs):
        g.create_edge(str(i + 1), str(i + rungs + 1), weight=_weight(rng))
    for i in range(rungs - 1):
        g.create_edge(str(i + 1), str(i + 2), weight=_weight(rng))
    for i in range(rungs - 1):
        g.create_edge(str(i + rungs + 1), str(i + rungs + 2), weight=_weight(rng))
    return g


# ---------------------------------------------------------------------------
# Random
# ---------------------------------------------------------------------------
def random_graph(
    num_nodes: int = 8,
    num_edges: int = 12,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Graph:
    """
    Ring of `num_nodes` (so the graph is always connected) plus random
    chords until `num_edges` distinct edges exist.  `num_edges` is capped
    at the number of possible pairs.
    """
    if num_nodes < 3:
        raise ValueError("random_graph needs at least 3 nodes")
    rng = _pick_rng(rng, seed)
    g = Graph()
    _ring_nodes(g, num_nodes, 140)

    for i in range(num_nodes):
        g.create_edge(str(i + 1), str((i + 1) % num_nodes + 1), weight=_weight(rng))

    target = min(num_edges, num_nodes * (num_nodes - 1) // 2)
    while g.edge_count() < target:
        a = rng.randint(1, num_nodes)
        b = rng.randint(1, num_nodes)
        if a == b or g.get_edge_between(str(a), str(b)) is not None:
            continue
        g.create_edge(str(a), str(b), weight=_weight(rng))
    return g


TEMPLATES: Dict[str, Callable[..., Graph]] = {
    "default":   default_graph,
    "cycle":     cycle_graph,
    "star":      star_graph,
    "grid":      grid_graph,
    "tree":      tree_graph,
    "complete":  complete_graph,
    "bipartite": bipartite_graph,
    "wheel":     wheel_graph,
    "ladder":    ladder_graph,
    "random":    random_graph,
}


def build_template(name: str, seed: Optional[int] = None) -> Graph:
    """Look up a template by name and build it.  Raises KeyError if unknown."""
    factory = TEMPLATES[name]
    return factory(seed=seed)
