# pylint: disable=protected-access,invalid-name
import networkx as nx
import pytest

from routegraph.algorithms.spf import (
    resolve_to_path,
    shortest_path,
    shortest_path_forcing_edges,
    spf,
)
from routegraph.exceptions import NodeNotFound, NoRouteFound
from routegraph.graph import Graph
from routegraph.graph.convert import to_digraph
from routegraph.model.path import Path


def test_spf_costs_and_pred(square_1):
    costs, pred = spf(square_1, "A")
    assert costs == {"A": 0, "B": 1, "C": 2, "D": 2}
    assert pred == {"A": None, "B": "A", "C": "B", "D": "A"}


def test_spf_unreachable_nodes_absent(line_1):
    costs, pred = spf(line_1, "B")
    assert costs == {"B": 0, "C": 4}
    assert "A" not in pred


def test_spf_tie_broken_by_insertion_order(square_2):
    _, pred = spf(square_2, "A")
    assert pred["C"] == "B"


def test_spf_missing_source(line_1):
    with pytest.raises(NodeNotFound):
        spf(line_1, "Z")


def test_spf_force_cycle_sets_source_cost(trains):
    costs, pred = spf(trains, "B", force_cycle=True)
    assert costs["B"] == 9
    assert pred["B"] == "E"


def test_shortest_path_a_c(trains):
    path = shortest_path(trains, "A", "C")
    assert path == Path(("A", "B", "C"), 9)


def test_shortest_path_trivial_self(trains):
    path = trains.shortest_path("B", "B")
    assert path.cost == 0
    assert path.nodes == ("B",)


def test_shortest_path_no_route(trains):
    g = trains.copy()
    g.add_node("F")
    with pytest.raises(NoRouteFound):
        g.shortest_path("A", "F")
    with pytest.raises(NoRouteFound):
        g.shortest_path("F", "A")


def test_shortest_path_missing_node(trains):
    with pytest.raises(NodeNotFound):
        trains.shortest_path("A", "Z")
    with pytest.raises(NodeNotFound):
        trains.shortest_path_forcing_edges("Z", "A")


def test_forcing_edges_b_b(trains):
    path = shortest_path_forcing_edges(trains, "B", "B")
    assert path.cost == 9
    assert path.nodes == ("B", "C", "E", "B")


def test_forcing_edges_same_as_plain_for_distinct_endpoints(trains):
    for src in trains:
        for dst in trains:
            if src == dst:
                continue
            try:
                expected = trains.shortest_path(src, dst)
            except NoRouteFound:
                with pytest.raises(NoRouteFound):
                    trains.shortest_path_forcing_edges(src, dst)
                continue
            assert trains.shortest_path_forcing_edges(src, dst) == expected


def test_forcing_edges_unreachable_source_raises(trains):
    # Nothing in the reference topology leads back into A.
    with pytest.raises(NoRouteFound):
        trains.shortest_path("B", "A")
    with pytest.raises(NoRouteFound):
        trains.shortest_path_forcing_edges("B", "A")


def test_forcing_edges_no_cycle(line_1):
    with pytest.raises(NoRouteFound):
        line_1.shortest_path_forcing_edges("A", "A")
    # Plain variant still answers with the trivial path.
    assert line_1.shortest_path("A", "A").cost == 0


def test_forcing_edges_self_loop():
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", 1)
    g.add_edge("B", "A", 1)
    g.add_edge("A", "A", 1)
    path = g.shortest_path_forcing_edges("A", "A")
    assert path == Path(("A", "A"), 1)


def test_forcing_edges_every_reference_node(trains):
    # Cheapest cycles through each town of the reference topology.
    assert trains.shortest_path_forcing_edges("C", "C").cost == 9
    assert trains.shortest_path_forcing_edges("D", "D").cost == 16
    assert trains.shortest_path_forcing_edges("E", "E").cost == 9
    with pytest.raises(NoRouteFound):
        trains.shortest_path_forcing_edges("A", "A")


def test_resolve_to_path_unknown_destination():
    with pytest.raises(NoRouteFound):
        resolve_to_path({"A": 0}, {"A": None}, "A", "B")


def test_shortest_path_matches_networkx(trains):
    nx_graph = to_digraph(trains)
    for src in trains:
        for dst in trains:
            try:
                expected = nx.dijkstra_path_length(nx_graph, src, dst)
            except nx.NetworkXNoPath:
                with pytest.raises(NoRouteFound):
                    trains.shortest_path(src, dst)
                continue
            path = trains.shortest_path(src, dst)
            assert path.cost == expected
            assert path.src_node == src and path.dst_node == dst
            if path.hops:
                assert trains.route_cost(*path) == path.cost


def test_shortest_path_not_above_enumerated_paths(trains):
    for src in trains:
        for dst in trains:
            if src == dst:
                continue
            try:
                best = trains.shortest_path(src, dst).cost
            except NoRouteFound:
                continue
            paths = trains.paths_by_weight_limit(src, dst, best + 20)
            assert paths
            assert all(best <= p.cost for p in paths)
            assert min(paths).cost == best
