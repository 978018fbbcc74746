"""Exception types raised by graph containers and algorithms.

Every error derives from :class:`GraphError` and also from the closest builtin
(``KeyError`` or ``ValueError``) so callers can catch either.
"""

from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base class for all routegraph errors."""


class NodeNotFound(GraphError, KeyError):
    """A node value was looked up but is not present in the graph."""

    def __init__(self, value: Hashable) -> None:
        super().__init__(f"Node '{value}' does not exist.")
        self.value = value

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class NoRouteFound(GraphError, ValueError):
    """The destination cannot be reached from the source."""

    def __init__(self, src: Hashable, dst: Hashable) -> None:
        super().__init__(f"No route from '{src}' to '{dst}'.")
        self.src = src
        self.dst = dst


class InvalidBound(GraphError, ValueError):
    """A hop or weight limit is not a positive integer."""

    def __init__(self, name: str, bound: object) -> None:
        super().__init__(f"'{name}' must be a positive integer, got {bound!r}.")
        self.name = name
        self.bound = bound


class DuplicateEdge(GraphError, ValueError):
    """An edge between the same ordered pair of nodes already exists."""

    def __init__(self, src: Hashable, dst: Hashable) -> None:
        super().__init__(f"Edge '{src}' -> '{dst}' already exists.")
        self.src = src
        self.dst = dst
