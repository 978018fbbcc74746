"""Shortest-path-first (SPF) algorithms.

Implements Dijkstra's algorithm over a :class:`~routegraph.graph.digraph.Graph`
using a min-priority queue, plus a variant that refuses the trivial zero-hop
answer when source and destination coincide.

Notes:
    Ties between nodes with equal distance are broken by graph insertion order,
    so results are deterministic for a given construction sequence.

    Only nodes that are not yet finalized are relaxed. With non-negative
    weights this never changes distances, but it is what lets the forced
    variant re-open the source exactly once.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import TYPE_CHECKING, Dict, List, Set, Tuple

from routegraph.exceptions import NoRouteFound
from routegraph.logging import get_logger
from routegraph.model.path import Path
from routegraph.types.base import Cost, CostMap, NodeID, PredMap

if TYPE_CHECKING:
    from routegraph.graph.digraph import Graph

logger = get_logger(__name__)


def spf(
    graph: Graph,
    src_node: NodeID,
    force_cycle: bool = False,
) -> Tuple[CostMap, PredMap]:
    """Compute shortest distances from a source node.

    Args:
        graph: The directed graph.
        src_node: The node value to start from.
        force_cycle: If True, re-open the source right after it is finalized,
            with unknown distance and no predecessor. The source then receives
            the cost of the cheapest cycle back to it (if any) instead of 0.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached node to its minimal cost from ``src_node``.
            Unreached nodes are absent.
          - pred: Maps each reached node to its predecessor on the best route;
            the source maps to None unless a cycle back to it was found.

    Raises:
        NodeNotFound: If ``src_node`` is not in the graph.
    """
    src = graph.get_node(src_node)

    # Insertion order of each node, used as the heap tie-breaker.
    order: Dict[NodeID, int] = {
        node.value: idx for idx, node in enumerate(graph.iter_nodes())
    }
    costs: CostMap = {src.value: 0}
    pred: PredMap = {src.value: None}
    finalized: Set[NodeID] = set()
    min_pq: List[Tuple[Cost, int, NodeID]] = [(0, order[src.value], src.value)]
    self_path_handled = False

    while min_pq:
        node_cost, _, node_id = heappop(min_pq)
        if node_id in finalized or costs.get(node_id) != node_cost:
            # Stale queue entry
            continue
        finalized.add(node_id)

        if force_cycle and not self_path_handled:
            # Re-open the source so a route back to it (self-loops included)
            # can be relaxed like any other node.
            self_path_handled = True
            finalized.discard(src.value)
            del costs[src.value]
            pred[src.value] = None

        node = graph.get_node(node_id)
        for edge in node.edges:
            neighbor_id = edge.target.value
            if neighbor_id in finalized:
                continue
            neighbor_cost = node_cost + edge.weight
            if neighbor_id not in costs or costs[neighbor_id] > neighbor_cost:
                costs[neighbor_id] = neighbor_cost
                pred[neighbor_id] = node_id
                heappush(min_pq, (neighbor_cost, order[neighbor_id], neighbor_id))
                logger.debug(
                    "Relaxed %r -> %r: cost=%s", node_id, neighbor_id, neighbor_cost
                )

    return costs, pred


def resolve_to_path(
    costs: CostMap,
    pred: PredMap,
    src_node: NodeID,
    dst_node: NodeID,
    closed: bool = False,
) -> Path:
    """Build a :class:`Path` from SPF results.

    Walks predecessors back from ``dst_node`` until ``src_node`` is reached.

    Args:
        costs: Cost map returned by :func:`spf`.
        pred: Predecessor map returned by :func:`spf`.
        src_node: Source the SPF was run from.
        dst_node: Destination to resolve.
        closed: If True, take at least one step back before stopping at the
            source. Required to resolve a cycle when ``src_node == dst_node``.

    Returns:
        Path from ``src_node`` to ``dst_node`` with its total cost.

    Raises:
        NoRouteFound: If ``dst_node`` has no known cost.
    """
    if dst_node not in costs:
        raise NoRouteFound(src_node, dst_node)

    nodes = [dst_node]
    current = dst_node
    while closed or current != src_node:
        closed = False
        current = pred[current]
        nodes.append(current)
    nodes.reverse()
    return Path(tuple(nodes), costs[dst_node])


def shortest_path(graph: Graph, src_node: NodeID, dst_node: NodeID) -> Path:
    """Return the cheapest path from ``src_node`` to ``dst_node``.

    When source and destination are equal the result is the zero-cost,
    single-node path.

    Raises:
        NodeNotFound: If either endpoint is not in the graph.
        NoRouteFound: If the destination is unreachable.
    """
    graph.get_node(dst_node)
    costs, pred = spf(graph, src_node)
    path = resolve_to_path(costs, pred, src_node, dst_node)
    logger.debug(
        "Shortest path %r -> %r: %s (cost=%s)", src_node, dst_node, path, path.cost
    )
    return path


def shortest_path_forcing_edges(
    graph: Graph, src_node: NodeID, dst_node: NodeID
) -> Path:
    """Return the cheapest path that traverses at least one edge.

    Differs from :func:`shortest_path` only when ``src_node == dst_node``: the
    result is then the cheapest cycle through the node, closed explicitly
    (e.g. ``B-C-E-B``).

    Raises:
        NodeNotFound: If either endpoint is not in the graph.
        NoRouteFound: If the destination is unreachable, or no cycle passes
            through the node when source and destination are equal.
    """
    graph.get_node(dst_node)
    is_cycle = src_node == dst_node
    costs, pred = spf(graph, src_node, force_cycle=is_cycle)
    path = resolve_to_path(costs, pred, src_node, dst_node, closed=is_cycle)
    logger.debug(
        "Shortest path with edges %r -> %r: %s (cost=%s)",
        src_node,
        dst_node,
        path,
        path.cost,
    )
    return path
