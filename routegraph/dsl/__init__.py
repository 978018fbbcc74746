"""Topology definition loading (YAML)."""

from routegraph.dsl.loader import load_graph_data, load_graph_yaml

__all__ = ["load_graph_data", "load_graph_yaml"]
