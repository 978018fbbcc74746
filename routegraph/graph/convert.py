"""Graph conversion utilities between routegraph Graph and NetworkX graphs.

``to_digraph`` exports a Graph as a ``networkx.DiGraph`` with weights stored
under an edge attribute. ``from_networkx`` imports any NetworkX graph: parallel
edges of multigraphs collapse into the cheapest one, and undirected edges
become a pair of opposite directed edges.
"""

from typing import Any, Optional

import networkx as nx

from routegraph.config import SEARCH_CONFIG
from routegraph.graph.digraph import Graph
from routegraph.logging import get_logger

logger = get_logger(__name__)


def to_digraph(graph: Graph, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert a Graph to a NetworkX DiGraph.

    Args:
        graph: The Graph to convert.
        weight_attr: Edge attribute that receives the edge weight.

    Returns:
        A NetworkX DiGraph with the same nodes (in insertion order) and edges.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph)
    for u, v, weight in graph.get_edges():
        nx_graph.add_edge(u, v, **{weight_attr: weight})
    return nx_graph


def _edge_weight(data: dict, weight_attr: str, default_weight: Optional[int]) -> Any:
    if weight_attr in data:
        return data[weight_attr]
    if default_weight is None:
        raise ValueError(f"Edge is missing the '{weight_attr}' attribute.")
    return default_weight


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    default_weight: Optional[int] = None,
) -> Graph:
    """Convert a NetworkX graph to a Graph.

    Args:
        nx_graph: Any NetworkX graph (directed or not, multi or not).
        weight_attr: Edge attribute holding the integer weight.
        default_weight: Weight for edges without ``weight_attr``. Falls back to
            ``SEARCH_CONFIG.default_weight``; if both are None such edges raise.

    Returns:
        A Graph with the same nodes and, per ordered node pair, one edge
        carrying the minimal weight.

    Raises:
        ValueError: If an edge has no weight and no default applies, or a
            weight is not a non-negative integer.
    """
    if default_weight is None:
        default_weight = SEARCH_CONFIG.default_weight

    weights = {}
    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        weight = _edge_weight(data, weight_attr, default_weight)
        pairs = [(u, v)] if directed or u == v else [(u, v), (v, u)]
        for pair in pairs:
            if pair not in weights or weight < weights[pair]:
                weights[pair] = weight

    graph = Graph()
    for node in nx_graph.nodes:
        graph.add_node(node)
    for (u, v), weight in weights.items():
        graph.add_edge(u, v, weight)

    logger.debug(
        "Imported NetworkX graph: %d nodes, %d edges", len(graph), len(weights)
    )
    return graph
