"""Reference railroad exercise.

Builds the five-town sample topology and answers the ten scripted questions
about it, rendering each answer as text lines::

      Output #1: 9
      Output #5: NO SUCH ROUTE
      Output #6: 2 paths found.

With ``verbose`` enabled, each answer is followed by per-leg or per-path
detail lines.
"""

from __future__ import annotations

from typing import List, Optional

from routegraph.exceptions import NoRouteFound
from routegraph.graph.digraph import Graph
from routegraph.logging import get_logger
from routegraph.model.path import Path

logger = get_logger(__name__)

NO_ROUTE = "NO SUCH ROUTE"

#: Edges of the reference topology as ``(src, dst, distance)``.
REFERENCE_EDGES = [
    ("A", "B", 5),
    ("B", "C", 4),
    ("C", "D", 8),
    ("D", "C", 8),
    ("D", "E", 6),
    ("A", "D", 5),
    ("C", "E", 2),
    ("E", "B", 3),
    ("A", "E", 7),
]

_DETAIL_INDENT = " " * 13


def reference_graph() -> Graph:
    """Return the five-node, nine-edge sample topology."""
    graph = Graph()
    for node in "ABCDE":
        graph.add_node(node)
    for src, dst, weight in REFERENCE_EDGES:
        graph.add_edge(src, dst, weight)
    return graph


class QuestionOutput:
    """Answers route questions against a graph and formats the results.

    Every method returns the lines it produced; nothing is printed.
    """

    def __init__(self, graph: Optional[Graph] = None, verbose: bool = False) -> None:
        self.graph = reference_graph() if graph is None else graph
        self.verbose = verbose

    def _legs(self, path: Path) -> List[str]:
        return [
            f"{_DETAIL_INDENT}{u} to {v} (Distance = {self.graph.edge_weight(u, v)})"
            for u, v in path.legs
        ]

    def calc_distance(self, question_no: int, *route: str) -> List[str]:
        """Distance along an explicit route, or ``NO SUCH ROUTE``."""
        try:
            answer = str(self.graph.route_cost(*route))
        except NoRouteFound:
            answer = NO_ROUTE
        lines = [f"  Output #{question_no}: {answer}"]

        if self.verbose:
            for u, v in zip(route, route[1:]):
                if self.graph.has_edge(u, v):
                    weight = self.graph.edge_weight(u, v)
                    lines.append(f"{_DETAIL_INDENT}{u} to {v} (Distance = {weight})")
                else:
                    lines.append(f"{_DETAIL_INDENT}{u} to {v} (NO ROUTE)")
            lines.append("")
        return lines

    def find_paths_by_depth_limit(
        self, question_no: int, src: str, dst: str, max_hops: int, exact: bool
    ) -> List[str]:
        paths = self.graph.paths_by_depth_limit(src, dst, max_hops, exact)
        return self._path_count_lines(question_no, paths, self.verbose)

    def find_paths_by_weight_limit(
        self, question_no: int, src: str, dst: str, max_weight: int
    ) -> List[str]:
        paths = self.graph.paths_by_weight_limit(src, dst, max_weight)
        # Always itemised: the path list is the interesting part of this answer.
        return self._path_count_lines(question_no, paths, True)

    def _path_count_lines(
        self, question_no: int, paths: List[Path], itemise: bool
    ) -> List[str]:
        lines = [f"  Output #{question_no}: {len(paths)} paths found."]
        if itemise:
            lines.extend(
                f"{_DETAIL_INDENT}Path: {' '.join(str(n) for n in path)}"
                for path in paths
            )
            lines.append("")
        return lines

    def find_shortest_path(
        self, question_no: int, src: str, dst: str, force_edges: bool = False
    ) -> List[str]:
        """Shortest distance, optionally excluding the trivial self path."""
        try:
            if force_edges:
                path = self.graph.shortest_path_forcing_edges(src, dst)
            else:
                path = self.graph.shortest_path(src, dst)
        except NoRouteFound:
            return [f"  Output #{question_no}: {NO_ROUTE}"]

        qualifier = "including" if force_edges else "potentially excluding"
        lines = [
            f"  Output #{question_no}: {path.cost} is the shortest path "
            f"{qualifier} edges."
        ]
        if self.verbose:
            lines.extend(self._legs(path))
            lines.append("")
        return lines


def run_exercise(verbose: bool = False, graph: Optional[Graph] = None) -> List[str]:
    """Answer the ten reference questions and return the output lines."""
    qo = QuestionOutput(graph, verbose)
    logger.debug("Running reference exercise (verbose=%s)", verbose)

    lines: List[str] = [""]
    # 1-5. Distances of explicit routes.
    lines += qo.calc_distance(1, "A", "B", "C")
    lines += qo.calc_distance(2, "A", "D")
    lines += qo.calc_distance(3, "A", "D", "C")
    lines += qo.calc_distance(4, "A", "E", "B", "C", "D")
    lines += qo.calc_distance(5, "A", "E", "D")
    # 6. Trips C to C with at most 3 stops.
    lines += qo.find_paths_by_depth_limit(6, "C", "C", 3, exact=False)
    # 7. Trips A to C with exactly 4 stops.
    lines += qo.find_paths_by_depth_limit(7, "A", "C", 4, exact=True)
    # 8-9. Shortest routes A to C and B to B.
    lines += qo.find_shortest_path(8, "A", "C")
    lines += qo.find_shortest_path(8, "A", "C", force_edges=True)
    lines += qo.find_shortest_path(9, "B", "B")
    lines += qo.find_shortest_path(9, "B", "B", force_edges=True)
    # 10. Routes C to C with distance less than 30.
    lines += qo.find_paths_by_weight_limit(10, "C", "C", 30)
    return lines
