"""Command-line interface for routegraph."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from routegraph.dsl.loader import load_graph_yaml
from routegraph.exceptions import GraphError, NoRouteFound
from routegraph.exercise import NO_ROUTE, reference_graph, run_exercise
from routegraph.graph.digraph import Graph
from routegraph.io import edge_specs_to_graph
from routegraph.logging import get_logger, level_for_flags, set_global_log_level

logger = get_logger(__name__)


def _load_graph(graph_file: Optional[Path], edges: Optional[str]) -> Graph:
    """Return the graph selected by ``--graph``/``--edges`` (reference by default)."""
    if graph_file is not None:
        logger.info(f"Loading topology from: {graph_file}")
        return load_graph_yaml(graph_file.read_text())
    if edges is not None:
        return edge_specs_to_graph(edges)
    return reference_graph()


def _run_exercise(detail: bool) -> None:
    for line in run_exercise(verbose=detail):
        print(line)


def _run_route(graph: Graph, nodes: List[str]) -> None:
    try:
        print(graph.route_cost(*nodes))
    except NoRouteFound:
        print(NO_ROUTE)


def _run_shortest(graph: Graph, src: str, dst: str, force_edges: bool) -> None:
    try:
        if force_edges:
            path = graph.shortest_path_forcing_edges(src, dst)
        else:
            path = graph.shortest_path(src, dst)
    except NoRouteFound:
        print(NO_ROUTE)
        return
    print(f"{path.cost} {path}")


def _run_trips(
    graph: Graph,
    src: str,
    dst: str,
    max_hops: Optional[int],
    max_weight: Optional[int],
    exact: bool,
) -> None:
    if max_weight is not None:
        paths = graph.paths_by_weight_limit(src, dst, max_weight, max_hops)
    elif max_hops is not None:
        paths = graph.paths_by_depth_limit(src, dst, max_hops, exact)
    else:
        raise ValueError("trips requires --max-hops or --max-weight")
    print(f"{len(paths)} paths found.")
    for path in paths:
        print(f"{path.cost} {path}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="routegraph",
        description="Query shortest paths and bounded trips on weighted digraphs.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{exercise,route,shortest,trips}",
        help="Available commands",
    )

    exercise_parser = subparsers.add_parser(
        "exercise", help="Answer the reference railroad questions"
    )
    exercise_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show per-leg distances and enumerated paths",
    )

    route_parser = subparsers.add_parser(
        "route", help="Distance along an explicit route"
    )
    route_parser.add_argument("nodes", nargs="+", help="Nodes visited in order")

    shortest_parser = subparsers.add_parser(
        "shortest", help="Shortest path between two nodes"
    )
    shortest_parser.add_argument("src", help="Source node")
    shortest_parser.add_argument("dst", help="Destination node")
    shortest_parser.add_argument(
        "--force-edges",
        action="store_true",
        help="Require at least one edge (cheapest cycle when src == dst)",
    )

    trips_parser = subparsers.add_parser(
        "trips", help="Enumerate trips bounded by hops or weight"
    )
    trips_parser.add_argument("src", help="Source node")
    trips_parser.add_argument("dst", help="Destination node")
    trips_parser.add_argument(
        "--max-hops", type=int, default=None, help="Maximum number of edges"
    )
    trips_parser.add_argument(
        "--max-weight",
        type=int,
        default=None,
        help="Exclusive upper bound on total weight",
    )
    trips_parser.add_argument(
        "--exact",
        action="store_true",
        help="Only trips with exactly --max-hops edges",
    )

    for p in (route_parser, shortest_parser, trips_parser):
        source = p.add_mutually_exclusive_group()
        source.add_argument(
            "--graph",
            "-g",
            type=Path,
            default=None,
            help="Topology YAML file (default: the reference topology)",
        )
        source.add_argument(
            "--edges",
            "-e",
            default=None,
            help="Compact edge specs, e.g. 'AB5, BC4, CD8'",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "exercise":
        _run_exercise(args.detail)
        return

    if args.command == "trips" and args.max_hops is None and args.max_weight is None:
        parser.error("trips requires --max-hops and/or --max-weight")
    if args.command == "trips" and args.exact and args.max_weight is not None:
        parser.error("--exact only applies to --max-hops without --max-weight")

    try:
        graph = _load_graph(args.graph, args.edges)
        if args.command == "route":
            _run_route(graph, args.nodes)
        elif args.command == "shortest":
            _run_shortest(graph, args.src, args.dst, args.force_edges)
        elif args.command == "trips":
            _run_trips(
                graph,
                args.src,
                args.dst,
                args.max_hops,
                args.max_weight,
                args.exact,
            )
    except FileNotFoundError:
        logger.error(f"Topology file not found: {args.graph}")
        sys.exit(1)
    except (GraphError, ValueError) as e:
        logger.error(f"Failed to run {args.command}: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
