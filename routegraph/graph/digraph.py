"""Directed, weighted graph with value-identified nodes.

`Graph` stores nodes in insertion order, each owning an adjacency list of
outgoing edges. Nodes are addressed by the values they wrap, and the graph
enforces explicit node management and predictable error handling:

  - Adding an existing node is a no-op.
  - Edges can only be added between existing nodes (``NodeNotFound``).
  - At most one edge per ordered pair of nodes (``DuplicateEdge``).
  - Edge weights are non-negative integers.
  - Removing a node removes every edge that targets it.

Shortest-path and path-enumeration algorithms are exposed as methods that
delegate to :mod:`routegraph.algorithms`.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from routegraph.algorithms.paths import paths_by_depth_limit, paths_by_weight_limit
from routegraph.algorithms.spf import shortest_path, shortest_path_forcing_edges
from routegraph.exceptions import DuplicateEdge, NoRouteFound, NodeNotFound
from routegraph.graph.node import Node
from routegraph.logging import get_logger
from routegraph.model.path import Path
from routegraph.types.base import Cost, NodeID

logger = get_logger(__name__)

EdgeTriple = Tuple[NodeID, NodeID, int]


def _validate_weight(weight: Any) -> int:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Edge weight must be an integer, got {weight!r}.")
    if weight < 0:
        raise ValueError(f"Edge weight must be non-negative, got {weight}.")
    return weight


class Graph:
    """A directed, weighted graph stored as adjacency lists.

    Iterating over the graph yields node values in insertion order.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeID, Node] = {}

    #
    # Node management
    #
    def add_node(self, value: NodeID) -> None:
        """Add a node for ``value``; do nothing if one already exists."""
        if value in self._nodes:
            return
        self._nodes[value] = Node(value)
        logger.debug("Added node %r", value)

    def remove_node(self, value: NodeID) -> None:
        """Remove a node and every edge in the graph that targets it.

        Raises:
            NodeNotFound: If the node does not exist.
        """
        node = self.get_node(value)
        for other in self._nodes.values():
            other.edges.remove(node)
        del self._nodes[value]
        logger.debug("Removed node %r", value)

    def get_node(self, value: NodeID) -> Node:
        """Return the node wrapping ``value``.

        Raises:
            NodeNotFound: If the node does not exist.
        """
        if value not in self:
            raise NodeNotFound(value)
        return self._nodes[value]

    def find_node(self, value: NodeID) -> Optional[Node]:
        """Return the node wrapping ``value`` or None."""
        return self._nodes[value] if value in self else None

    def contains(self, value: Any) -> bool:
        return value in self

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate over node objects in insertion order."""
        return iter(self._nodes.values())

    #
    # Edge management
    #
    def add_edge(self, src_node: NodeID, dst_node: NodeID, weight: int) -> None:
        """Add a directed edge from ``src_node`` to ``dst_node``.

        Args:
            src_node: Source node value. Must exist in the graph.
            dst_node: Target node value. Must exist in the graph.
            weight: Non-negative integer weight.

        Raises:
            NodeNotFound: If either node does not exist.
            DuplicateEdge: If an edge from ``src_node`` to ``dst_node`` exists.
            ValueError: If the weight is negative or not an integer.
        """
        src = self.get_node(src_node)
        dst = self.get_node(dst_node)
        weight = _validate_weight(weight)
        if src.edges.contains(dst):
            raise DuplicateEdge(src_node, dst_node)
        src.edges.add(dst, weight)
        logger.debug("Added edge %r -> %r (weight=%d)", src_node, dst_node, weight)

    def remove_edge(self, src_node: NodeID, dst_node: NodeID) -> None:
        """Remove the edge from ``src_node`` to ``dst_node`` if present.

        Raises:
            NodeNotFound: If either node does not exist.
        """
        src = self.get_node(src_node)
        dst = self.get_node(dst_node)
        src.edges.remove(dst)
        logger.debug("Removed edge %r -> %r", src_node, dst_node)

    def has_edge(self, src_node: NodeID, dst_node: NodeID) -> bool:
        src = self._nodes.get(src_node)
        dst = self._nodes.get(dst_node)
        if src is None or dst is None:
            return False
        return src.edges.contains(dst)

    def edge_weight(self, src_node: NodeID, dst_node: NodeID) -> int:
        """Return the weight of the direct edge from ``src_node`` to ``dst_node``.

        Raises:
            NodeNotFound: If either node does not exist.
            NoRouteFound: If there is no such edge.
        """
        src = self.get_node(src_node)
        edge = src.edges.lookup(self.get_node(dst_node))
        if edge is None:
            raise NoRouteFound(src_node, dst_node)
        return edge.weight

    def get_edges(self) -> List[EdgeTriple]:
        """Return all edges as ``(src, dst, weight)`` triples.

        Ordered by source node insertion, then by edge insertion.
        """
        return [
            (node.value, edge.target.value, edge.weight)
            for node in self._nodes.values()
            for edge in node.edges
        ]

    def has_zero_weight_edges(self) -> bool:
        return any(
            edge.weight == 0 for node in self._nodes.values() for edge in node.edges
        )

    def copy(self) -> Graph:
        """Return an independent copy with the same nodes and edges."""
        clone = Graph()
        for value in self._nodes:
            clone.add_node(value)
        for src_node, dst_node, weight in self.get_edges():
            clone.add_edge(src_node, dst_node, weight)
        return clone

    #
    # Routes and algorithms
    #
    def route_cost(self, *route: NodeID) -> Cost:
        """Return the total weight of an explicit route.

        Args:
            *route: Node values visited in order, e.g. ``("A", "B", "C")``.

        Raises:
            NodeNotFound: If any value is not in the graph.
            NoRouteFound: If two consecutive values are not joined by an edge.
            ValueError: If fewer than two values are given.
        """
        if len(route) < 2:
            raise ValueError("A route needs at least two nodes.")
        for value in route:
            self.get_node(value)
        return sum(self.edge_weight(u, v) for u, v in zip(route, route[1:]))

    def shortest_path(self, src_node: NodeID, dst_node: NodeID) -> Path:
        """See :func:`routegraph.algorithms.spf.shortest_path`."""
        return shortest_path(self, src_node, dst_node)

    def shortest_path_forcing_edges(self, src_node: NodeID, dst_node: NodeID) -> Path:
        """See :func:`routegraph.algorithms.spf.shortest_path_forcing_edges`."""
        return shortest_path_forcing_edges(self, src_node, dst_node)

    def paths_by_depth_limit(
        self, src_node: NodeID, dst_node: NodeID, max_hops: int, exact: bool = False
    ) -> List[Path]:
        """See :func:`routegraph.algorithms.paths.paths_by_depth_limit`."""
        return paths_by_depth_limit(self, src_node, dst_node, max_hops, exact)

    def paths_by_weight_limit(
        self,
        src_node: NodeID,
        dst_node: NodeID,
        max_weight: int,
        max_hops: Optional[int] = None,
    ) -> List[Path]:
        """See :func:`routegraph.algorithms.paths.paths_by_weight_limit`."""
        return paths_by_weight_limit(self, src_node, dst_node, max_weight, max_hops)

    #
    # Container protocol
    #
    def __contains__(self, value: Any) -> bool:
        try:
            return value in self._nodes
        except TypeError:
            # Unhashable values cannot be nodes.
            return False

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self.get_edges())})"
