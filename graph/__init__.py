"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import TEMPLATES, default_graph, random_graph
"""

from graph.node      import Node
from graph.edge      import Edge
from graph.graph     import Graph
from graph.templates import TEMPLATES, build_template, default_graph, random_graph

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "TEMPLATES",
    "build_template",
    "default_graph",
    "random_graph",
]
