import pytest

from routegraph.config import SEARCH_CONFIG
from routegraph.dsl.loader import load_graph_data, load_graph_yaml
from routegraph.exceptions import DuplicateEdge


def test_load_mapping_edges():
    g = load_graph_yaml(
        """
nodes: [C, B, A]
edges:
  - {source: A, target: B, weight: 5}
  - source: B
    target: C
    weight: 4
"""
    )
    assert list(g) == ["C", "B", "A"]
    assert g.route_cost("A", "B", "C") == 9


def test_load_compact_edges(trains):
    g = load_graph_yaml(
        """
edges:
  - AB5, BC4, CD8
  - DC8
  - DE6
  - AD5 CE2 EB3 AE7
"""
    )
    assert g.get_edges() == trains.get_edges()


def test_load_empty_document():
    g = load_graph_yaml("")
    assert len(g) == 0


def test_load_non_mapping():
    with pytest.raises(ValueError, match="dictionary"):
        load_graph_yaml("- a\n- b\n")


@pytest.mark.parametrize(
    "data, message",
    [
        ({"nodes": "A"}, "'nodes' must be a list"),
        ({"edges": {"A": "B"}}, "'edges' must be a list"),
        ({"edges": [1]}, "must be a mapping"),
        ({"edges": [{"source": "A"}]}, "must include"),
        ({"edges": [{"source": "A", "target": "B", "cost": 1}]}, "Unrecognized key"),
        ({"edges": [{"source": "A", "target": "B"}]}, "missing 'weight'"),
    ],
)
def test_load_malformed(data, message):
    with pytest.raises(ValueError, match=message):
        load_graph_data(data)


def test_load_default_weight(monkeypatch):
    monkeypatch.setattr(SEARCH_CONFIG, "default_weight", 1)
    g = load_graph_data({"edges": [{"source": "A", "target": "B"}]})
    assert g.get_edges() == [("A", "B", 1)]


def test_load_duplicate_edge():
    with pytest.raises(DuplicateEdge):
        load_graph_data({"edges": ["AB1", {"source": "A", "target": "B", "weight": 2}]})
