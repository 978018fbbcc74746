"""routegraph: shortest paths and bounded route enumeration on weighted digraphs.

Primary API:
    Graph - Directed, weighted graph with value-identified nodes
    Path - Result of every route query (node sequence + total cost)
    NodeNotFound, NoRouteFound, InvalidBound, DuplicateEdge - Error types

Example:
    from routegraph import Graph

    g = Graph()
    for town in "ABC":
        g.add_node(town)
    g.add_edge("A", "B", 5)
    g.add_edge("B", "C", 4)

    g.route_cost("A", "B", "C")             # 9
    g.shortest_path("A", "C").cost          # 9
    g.paths_by_depth_limit("A", "C", 3)     # [Path(nodes=('A', 'B', 'C'), cost=9)]
"""

from __future__ import annotations

from routegraph import cli, logging
from routegraph.config import SEARCH_CONFIG, SearchConfig
from routegraph.exceptions import (
    DuplicateEdge,
    GraphError,
    InvalidBound,
    NodeNotFound,
    NoRouteFound,
)
from routegraph.graph import Edge, EdgeList, Graph, Node
from routegraph.model.path import Path

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Node",
    "Edge",
    "EdgeList",
    "Path",
    # Errors
    "GraphError",
    "NodeNotFound",
    "NoRouteFound",
    "InvalidBound",
    "DuplicateEdge",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "cli",
    "logging",
]
