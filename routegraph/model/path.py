"""Lightweight representation of a single route through a graph.

The ``Path`` dataclass stores the ordered node values from source to
destination (inclusive) and the total weight of the traversed edges. Paths
compare equal on both fields and order by cost, so a list of results can be
sorted cheapest-first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterator, Tuple

from routegraph.types import Cost


@dataclass(frozen=True)
class Path:
    """Represents a single path in the graph.

    Attributes:
        nodes: Node values in traversal order; source first, destination last.
            A node may appear more than once when the walk contains a cycle.
        cost: Sum of the weights of the traversed edges.
    """

    nodes: Tuple[Hashable, ...]
    cost: Cost

    def __getitem__(self, idx: int) -> Hashable:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.nodes)

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.nodes)

    @property
    def src_node(self) -> Hashable:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> Hashable:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Return the number of edges traversed."""
        return len(self.nodes) - 1

    @property
    def legs(self) -> Tuple[Tuple[Hashable, Hashable], ...]:
        """Return consecutive ``(from, to)`` pairs along the path."""
        return tuple(zip(self.nodes, self.nodes[1:]))

    def __lt__(self, other: Any) -> bool:
        """Compare two paths based on their cost.

        Returns NotImplemented if ``other`` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __str__(self) -> str:
        return "-".join(str(node) for node in self.nodes)
