"""Shared graph fixtures.

Edge weights are drawn next to each fixture; arrows show edge direction.
"""

from __future__ import annotations

import pytest

from routegraph.graph import Graph


def build_graph(nodes, edges) -> Graph:
    g = Graph()
    for node in nodes:
        g.add_node(node)
    for src, dst, weight in edges:
        g.add_edge(src, dst, weight)
    return g


@pytest.fixture
def trains():
    # Reference railroad topology:
    #   A->B 5, B->C 4, C->D 8, D->C 8, D->E 6,
    #   A->D 5, C->E 2, E->B 3, A->E 7
    return build_graph(
        "ABCDE",
        [
            ("A", "B", 5),
            ("B", "C", 4),
            ("C", "D", 8),
            ("D", "C", 8),
            ("D", "E", 6),
            ("A", "D", 5),
            ("C", "E", 2),
            ("E", "B", 3),
            ("A", "E", 7),
        ],
    )


@pytest.fixture
def square_1():
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return build_graph(
        "ABCD",
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)],
    )


@pytest.fixture
def square_2():
    # Two equal-cost routes A->C; B comes first in insertion order.
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   A                   C
    #   └────────►D─────────┘
    #       [1]        [1]
    return build_graph(
        "ABCD",
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 1), ("D", "C", 1)],
    )


@pytest.fixture
def line_1():
    #    [3]     [4]
    #  A────►B────►C
    return build_graph("ABC", [("A", "B", 3), ("B", "C", 4)])


@pytest.fixture
def zero_loop():
    # B and C are joined by zero-weight edges in both directions.
    #    [1]     [0]
    #  A────►B◄───►C
    #          [0]
    return build_graph("ABC", [("A", "B", 1), ("B", "C", 0), ("C", "B", 0)])
