"""Graph vertices and their outgoing adjacency lists.

A :class:`Node` wraps one hashable value and owns an :class:`EdgeList` of
outgoing :class:`Edge` objects. Equality is value based: two nodes are equal
when their values are equal, and two edges are equal when their targets are.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional

from routegraph.types.base import NodeID


class Edge:
    """Directed, weighted link to a target node.

    The edge does not own its target; the target lives in the graph's node
    collection.
    """

    __slots__ = ("target", "weight")

    def __init__(self, target: Node, weight: int) -> None:
        self.target = target
        self.weight = weight

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.target == other.target

    def __hash__(self) -> int:
        return hash(self.target)

    def __repr__(self) -> str:
        return f"Edge(-> {self.target.value!r}, weight={self.weight})"


class EdgeList:
    """Ordered collection of a node's outgoing edges.

    Lookups are linear scans comparing targets by equality. ``add`` appends
    without checking for an existing edge to the same target; the graph
    container enforces uniqueness.
    """

    def __init__(self) -> None:
        self._edges: List[Edge] = []

    def add(self, target: Node, weight: int) -> Edge:
        """Append an edge to ``target`` and return it."""
        edge = Edge(target, weight)
        self._edges.append(edge)
        return edge

    def remove(self, target: Node) -> None:
        """Delete the first edge to ``target``; do nothing if there is none."""
        for idx, edge in enumerate(self._edges):
            if edge.target == target:
                del self._edges[idx]
                return

    def contains(self, target: Node) -> bool:
        return self.lookup(target) is not None

    def lookup(self, target: Node) -> Optional[Edge]:
        """Return the first edge to ``target`` or None."""
        for edge in self._edges:
            if edge.target == target:
                return edge
        return None

    def clear(self) -> None:
        self._edges.clear()

    def __contains__(self, target: Any) -> bool:
        return isinstance(target, Node) and self.contains(target)

    def __getitem__(self, target: Node) -> Edge:
        edge = self.lookup(target)
        if edge is None:
            raise KeyError(f"No edge to '{target.value}'.")
        return edge

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"EdgeList({self._edges!r})"


class Node:
    """A graph vertex holding one value and owning its outgoing edges.

    Attributes:
        value: The application value identifying this node. Treated as immutable.
        edges: Outgoing edges in insertion order.
    """

    __slots__ = ("_value", "edges")

    def __init__(self, value: NodeID) -> None:
        self._value = value
        self.edges = EdgeList()

    @property
    def value(self) -> NodeID:
        return self._value

    @property
    def neighbors(self) -> List[Node]:
        """Targets of outgoing edges, in edge order."""
        return [edge.target for edge in self.edges]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Node({self._value!r})"
