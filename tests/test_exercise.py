from routegraph.exercise import (
    NO_ROUTE,
    REFERENCE_EDGES,
    QuestionOutput,
    reference_graph,
    run_exercise,
)
from routegraph.io import edge_specs_to_graph

DETAIL = " " * 13


def test_reference_graph(trains):
    g = reference_graph()
    assert list(g) == ["A", "B", "C", "D", "E"]
    assert g.get_edges() == trains.get_edges()
    assert len(REFERENCE_EDGES) == 9


def test_run_exercise_answers():
    lines = run_exercise()
    answers = [line for line in lines if line.startswith("  Output #")]
    assert answers == [
        "  Output #1: 9",
        "  Output #2: 5",
        "  Output #3: 13",
        "  Output #4: 22",
        f"  Output #5: {NO_ROUTE}",
        "  Output #6: 2 paths found.",
        "  Output #7: 3 paths found.",
        "  Output #8: 9 is the shortest path potentially excluding edges.",
        "  Output #8: 9 is the shortest path including edges.",
        "  Output #9: 0 is the shortest path potentially excluding edges.",
        "  Output #9: 9 is the shortest path including edges.",
        "  Output #10: 7 paths found.",
    ]


def test_run_exercise_lists_weight_limited_paths():
    lines = run_exercise()
    paths = [line.strip() for line in lines if line.strip().startswith("Path:")]
    assert paths == [
        "Path: C D C",
        "Path: C D C E B C",
        "Path: C D E B C",
        "Path: C E B C",
        "Path: C E B C D C",
        "Path: C E B C E B C",
        "Path: C E B C E B C E B C",
    ]


def test_calc_distance_verbose():
    qo = QuestionOutput(verbose=True)
    assert qo.calc_distance(5, "A", "E", "D") == [
        f"  Output #5: {NO_ROUTE}",
        f"{DETAIL}A to E (Distance = 7)",
        f"{DETAIL}E to D (NO ROUTE)",
        "",
    ]


def test_find_shortest_path_verbose():
    qo = QuestionOutput(verbose=True)
    assert qo.find_shortest_path(9, "B", "B", force_edges=True) == [
        "  Output #9: 9 is the shortest path including edges.",
        f"{DETAIL}B to C (Distance = 4)",
        f"{DETAIL}C to E (Distance = 2)",
        f"{DETAIL}E to B (Distance = 3)",
        "",
    ]


def test_find_shortest_path_no_route():
    qo = QuestionOutput()
    assert qo.find_shortest_path(1, "A", "A", force_edges=True) == [
        f"  Output #1: {NO_ROUTE}"
    ]


def test_depth_limit_verbose_lists_paths():
    qo = QuestionOutput(verbose=True)
    assert qo.find_paths_by_depth_limit(6, "C", "C", 3, exact=False) == [
        "  Output #6: 2 paths found.",
        f"{DETAIL}Path: C D C",
        f"{DETAIL}Path: C E B C",
        "",
    ]


def test_custom_graph():
    g = edge_specs_to_graph("AB1, BC1")
    lines = run_exercise(graph=edge_specs_to_graph("AB1, BC1, CD1, DE1, AD1, AE1"))
    assert "  Output #1: 2" in lines
    assert QuestionOutput(g).calc_distance(1, "A", "B", "C") == ["  Output #1: 2"]
