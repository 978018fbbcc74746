"""Graph primitives and helpers.

This package provides the adjacency-list `Graph` container, its `Node`,
`Edge` and `EdgeList` building blocks, and NetworkX conversion helpers
(`convert`).
"""

from routegraph.graph.digraph import Graph
from routegraph.graph.node import Edge, EdgeList, Node

__all__ = ["Graph", "Node", "Edge", "EdgeList"]
