"""Graph algorithms: Dijkstra shortest paths and bounded path enumeration."""

from routegraph.algorithms.paths import paths_by_depth_limit, paths_by_weight_limit
from routegraph.algorithms.spf import (
    resolve_to_path,
    shortest_path,
    shortest_path_forcing_edges,
    spf,
)

__all__ = [
    "spf",
    "resolve_to_path",
    "shortest_path",
    "shortest_path_forcing_edges",
    "paths_by_depth_limit",
    "paths_by_weight_limit",
]
