"""Text formats for building graphs.

Two line-oriented formats are supported:

- Compact edge specs such as ``"AB5, BC4"``: a one-character source, a
  one-character target and an integer weight per token.
- Edge lists with one ``<src><sep><dst><sep><weight>`` edge per line.

Both add nodes on first sight, in the order they appear.
"""

import re
from typing import Iterable, List, Optional, Tuple

from routegraph.graph.digraph import Graph

_EDGE_SPEC_RE = re.compile(r"^(\S)(\S)(\d+)$")


def parse_edge_specs(text: str) -> List[Tuple[str, str, int]]:
    """Parse compact edge specs into ``(src, dst, weight)`` triples.

    Tokens are separated by commas and/or whitespace.

    Raises:
        ValueError: If a token is not of the form ``<src><dst><weight>``.
    """
    triples = []
    for token in re.split(r"[,\s]+", text.strip()):
        if not token:
            continue
        match = _EDGE_SPEC_RE.match(token)
        if match is None:
            raise ValueError(f"Malformed edge spec '{token}'.")
        src, dst, weight = match.groups()
        triples.append((src, dst, int(weight)))
    return triples


def edge_specs_to_graph(text: str, graph: Optional[Graph] = None) -> Graph:
    """Build (or extend) a Graph from compact edge specs."""
    graph = Graph() if graph is None else graph
    for src, dst, weight in parse_edge_specs(text):
        graph.add_node(src)
        graph.add_node(dst)
        graph.add_edge(src, dst, weight)
    return graph


def edgelist_to_graph(
    lines: Iterable[str],
    separator: Optional[str] = None,
    graph: Optional[Graph] = None,
) -> Graph:
    """Build (or extend) a Graph from edge-list lines.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        lines: Lines of ``src dst weight``.
        separator: Field separator; None splits on any whitespace.
        graph: Existing graph to extend.

    Raises:
        ValueError: If a line does not have exactly three fields or the weight
            is not an integer.
    """
    graph = Graph() if graph is None else graph

    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        tokens = [token.strip() for token in line.split(sep=separator)]
        if len(tokens) != 3:
            raise ValueError(
                f"Line {lineno}: expected 3 fields (src, dst, weight), got {len(tokens)}."
            )
        src, dst, weight = tokens
        graph.add_node(src)
        graph.add_node(dst)
        graph.add_edge(src, dst, int(weight))

    return graph
