"""YAML loader for graph topologies.

Accepted document shape::

    nodes: [A, B, C]          # optional; edge endpoints are added implicitly
    edges:
      - {source: A, target: B, weight: 5}
      - AB5                    # compact form, see routegraph.io

Nodes listed under ``nodes`` are added first, in order, so they control the
graph's iteration order.
"""

from __future__ import annotations

from typing import Any, Dict

import yaml

from routegraph.config import SEARCH_CONFIG
from routegraph.graph.digraph import Graph
from routegraph.io import edge_specs_to_graph
from routegraph.logging import get_logger

logger = get_logger(__name__)

_EDGE_KEYS = {"source", "target", "weight"}


def _add_edge_entry(graph: Graph, entry: Any) -> None:
    if isinstance(entry, str):
        edge_specs_to_graph(entry, graph)
        return

    if not isinstance(entry, dict):
        raise ValueError(
            "Each edge definition must be a mapping with 'source' and 'target'"
        )
    unknown = set(entry) - _EDGE_KEYS
    if unknown:
        key = sorted(unknown, key=str)[0]
        raise ValueError(f"Unrecognized key '{key}' in edge definition")
    if "source" not in entry or "target" not in entry:
        raise ValueError("Each edge definition must include 'source' and 'target'")

    weight = entry.get("weight", SEARCH_CONFIG.default_weight)
    if weight is None:
        raise ValueError(
            f"Edge '{entry['source']}' -> '{entry['target']}' is missing 'weight'"
        )
    graph.add_node(entry["source"])
    graph.add_node(entry["target"])
    graph.add_edge(entry["source"], entry["target"], weight)


def load_graph_data(data: Dict[str, Any]) -> Graph:
    """Build a Graph from an already parsed topology mapping."""
    nodes = data.get("nodes", [])
    edges = data.get("edges", [])
    if not isinstance(nodes, list):
        raise ValueError("'nodes' must be a list")
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")

    graph = Graph()
    for node in nodes:
        graph.add_node(node)
    for entry in edges:
        _add_edge_entry(graph, entry)

    logger.debug(
        "Loaded topology: %d nodes, %d edges", len(graph), len(graph.get_edges())
    )
    return graph


def load_graph_yaml(yaml_str: str) -> Graph:
    """Parse a YAML topology document into a Graph.

    Raises:
        ValueError: If the document is not a mapping or an entry is malformed.
        NodeNotFound, DuplicateEdge: Propagated from graph construction.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    return load_graph_data(data)
