"""Exhaustive path enumeration under hop-count or weight bounds.

Both searches are depth-first and allow nodes to repeat, so cycles are walked
as long as the bound permits. The traversal keeps an explicit stack of edge
iterators instead of recursing; the bounds are caller supplied and would
otherwise translate directly into interpreter stack depth.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from routegraph.config import SEARCH_CONFIG
from routegraph.exceptions import InvalidBound
from routegraph.logging import get_logger
from routegraph.model.path import Path
from routegraph.types.base import Cost, NodeID

if TYPE_CHECKING:
    from routegraph.graph.digraph import Graph
    from routegraph.graph.node import Edge, Node

logger = get_logger(__name__)


def _check_bound(name: str, bound: object) -> None:
    if isinstance(bound, bool) or not isinstance(bound, int) or bound <= 0:
        raise InvalidBound(name, bound)


def _to_path(nodes: List[Node], cost: Cost) -> Path:
    return Path(tuple(node.value for node in nodes), cost)


def paths_by_depth_limit(
    graph: Graph,
    src_node: NodeID,
    dst_node: NodeID,
    max_hops: int,
    exact: bool = False,
) -> List[Path]:
    """Enumerate walks from ``src_node`` to ``dst_node`` bounded by hop count.

    A walk ends as soon as it reaches the destination: the walk is recorded
    and the search backtracks instead of continuing through the destination.
    The zero-hop walk from a node to itself is never reported.

    Args:
        graph: The directed graph.
        src_node: Start node value.
        dst_node: End node value.
        max_hops: Maximum number of edges in a walk.
        exact: If True, only walks with exactly ``max_hops`` edges are
            reported. Reaching the destination early does not stop the walk
            in this mode.

    Returns:
        Walks in depth-first discovery order.

    Raises:
        NodeNotFound: If either endpoint is not in the graph.
        InvalidBound: If ``max_hops`` is not a positive integer.
    """
    _check_bound("max_hops", max_hops)
    src = graph.get_node(src_node)
    dst = graph.get_node(dst_node)

    results: List[Path] = []
    walk: List[Node] = [src]
    stack: List[Tuple[Iterator[Edge], Cost]] = [(iter(src.edges), 0)]

    while stack:
        edges, cost = stack[-1]
        edge = next(edges, None)
        if edge is None:
            stack.pop()
            walk.pop()
            continue

        walk.append(edge.target)
        hops = len(walk) - 1
        new_cost = cost + edge.weight

        if edge.target == dst and (not exact or hops == max_hops):
            results.append(_to_path(walk, new_cost))
            walk.pop()
            continue
        if hops >= max_hops:
            walk.pop()
            continue

        stack.append((iter(edge.target.edges), new_cost))

    logger.debug(
        "Found %d paths %r -> %r within %d hops (exact=%s)",
        len(results),
        src_node,
        dst_node,
        max_hops,
        exact,
    )
    return results


def paths_by_weight_limit(
    graph: Graph,
    src_node: NodeID,
    dst_node: NodeID,
    max_weight: int,
    max_hops: Optional[int] = None,
) -> List[Path]:
    """Enumerate walks from ``src_node`` to ``dst_node`` lighter than a limit.

    Every walk whose total weight is strictly below ``max_weight`` and which
    ends at the destination is reported. Reaching the destination does not
    stop the search, so walks passing through it several times are reported
    once per arrival.

    Walks over zero-weight edges do not accumulate weight. When the graph has
    such edges and ``max_hops`` is not given, the walk length is capped at
    ``SEARCH_CONFIG.zero_weight_hop_ceiling``.

    Args:
        graph: The directed graph.
        src_node: Start node value.
        dst_node: End node value.
        max_weight: Exclusive upper bound on the total walk weight.
        max_hops: Optional maximum number of edges in a walk.

    Returns:
        Walks in depth-first discovery order.

    Raises:
        NodeNotFound: If either endpoint is not in the graph.
        InvalidBound: If ``max_weight`` (or a given ``max_hops``) is not a
            positive integer.
    """
    _check_bound("max_weight", max_weight)
    if max_hops is not None:
        _check_bound("max_hops", max_hops)
    src = graph.get_node(src_node)
    dst = graph.get_node(dst_node)

    hop_ceiling = max_hops
    if hop_ceiling is None:
        hop_ceiling = SEARCH_CONFIG.hop_ceiling(graph.has_zero_weight_edges())
        if hop_ceiling is not None:
            logger.warning(
                "Graph has zero-weight edges; limiting walks to %d hops", hop_ceiling
            )

    results: List[Path] = []
    walk: List[Node] = [src]
    stack: List[Tuple[Iterator[Edge], Cost]] = [(iter(src.edges), 0)]

    while stack:
        edges, cost = stack[-1]
        edge = next(edges, None)
        if edge is None:
            stack.pop()
            walk.pop()
            continue

        new_cost = cost + edge.weight
        if new_cost >= max_weight:
            continue

        walk.append(edge.target)
        if edge.target == dst:
            results.append(_to_path(walk, new_cost))

        if hop_ceiling is not None and len(walk) - 1 >= hop_ceiling:
            walk.pop()
            continue
        stack.append((iter(edge.target.edges), new_cost))

    logger.debug(
        "Found %d paths %r -> %r below weight %d",
        len(results),
        src_node,
        dst_node,
        max_weight,
    )
    return results
