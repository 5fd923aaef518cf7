"""
Tests for BFS, DFS, Dijkstra and A* on the sample graph and on small
hand-built graphs.
"""

import pytest

from algorithms import StepKind
from config import MAX_GRAPH_NODES
from engine import run_algorithm
from errors import InvalidInputError
from graph import Graph

GRAPH_KEYS = ["bfs", "dfs", "dijkstra", "astar"]


def _path(log):
    highlights = [e for e in log if e.kind is StepKind.HIGHLIGHT]
    return list(highlights[-1].targets) if highlights else None


def _visits(log):
    return [e.targets[0] for e in log if e.kind is StepKind.VISIT]


def test_bfs_finds_fewest_hops(sample_graph):
    log = run_algorithm("bfs", graph=sample_graph, source="A", target="F")

    assert log[0].kind is StepKind.MESSAGE
    assert _path(log) == ["A", "B", "D", "F"]
    assert _visits(log) == ["A", "B", "C", "D", "G", "E", "F"]


def test_dfs_takes_first_declared_branch(sample_graph):
    log = run_algorithm("dfs", graph=sample_graph, source="A", target="F")

    assert _path(log) == ["A", "B", "D", "F"]
    assert _visits(log) == ["A", "B", "D", "F"]


def test_dfs_records_backtracking():
    g = Graph()
    for nid in "ABC":
        g.create_node(nid)
    g.create_edge("A", "B")
    g.create_edge("A", "C")
    log = run_algorithm("dfs", graph=g, source="A", target="C")

    messages = [e for e in log if e.kind is StepKind.MESSAGE]
    assert len(messages) == 2
    assert messages[1].targets == ("A",)
    assert _path(log) == ["A", "C"]


def test_dijkstra_shortest_path(sample_graph):
    log = run_algorithm("dijkstra", graph=sample_graph, source="A", target="F")
    path = _path(log)

    assert path == ["A", "C", "G", "E", "F"]
    assert sample_graph.path_cost(path) == 6
    assert _visits(log) == ["A", "C", "G", "B", "E", "F"]


def test_dijkstra_visit_carries_settled_distance(sample_graph):
    log = run_algorithm("dijkstra", graph=sample_graph, source="A", target="F")
    settled = {e.targets[0]: e.value for e in log if e.kind is StepKind.VISIT}

    assert settled == {"A": 0, "C": 2, "G": 3, "B": 4, "E": 5, "F": 6}


def test_dijkstra_compare_before_update(sample_graph):
    """Every successful relaxation is directly preceded by its COMPARE."""
    log = run_algorithm("dijkstra", graph=sample_graph, source="A", target="F")
    for e in log:
        if e.kind is StepKind.UPDATE_VALUE:
            prev = log[e.index - 1]
            assert prev.kind is StepKind.COMPARE
            assert prev.targets == e.targets


def test_astar_shortest_path(sample_graph):
    log = run_algorithm("astar", graph=sample_graph, source="A", target="F")
    path = _path(log)

    assert path == ["A", "C", "G", "E", "F"]
    assert sample_graph.path_cost(path) == 6


def test_astar_values_are_cost_breakdowns(sample_graph):
    log = run_algorithm("astar", graph=sample_graph, source="A", target="F")
    first_visit = next(e for e in log if e.kind is StepKind.VISIT)

    assert first_visit.targets == ("A",)
    assert first_visit.value["g"] == 0
    assert first_visit.value["h"] == pytest.approx(10.0)
    assert first_visit.value["f"] == pytest.approx(10.0)


def test_tie_goes_to_first_declared_node():
    """Two equally close nodes: the one declared first is selected first."""
    g = Graph()
    for nid in ("S", "Y", "X", "T"):
        g.create_node(nid)
    g.create_edge("S", "X", 1)
    g.create_edge("S", "Y", 1)
    g.create_edge("X", "T", 5)
    g.create_edge("Y", "T", 5)
    log = run_algorithm("dijkstra", graph=g, source="S", target="T")

    assert _visits(log)[:3] == ["S", "Y", "X"]
    assert _path(log) == ["S", "Y", "T"]


@pytest.mark.parametrize("key", GRAPH_KEYS)
def test_unreachable_goal_has_no_path(key):
    g = Graph()
    for nid in "ABC":
        g.create_node(nid)
    g.create_edge("A", "B")
    log = run_algorithm(key, graph=g, source="A", target="C")

    assert len(log) > 0
    assert not log.has_kind(StepKind.HIGHLIGHT)
    assert "C" not in _visits(log)


@pytest.mark.parametrize("key", GRAPH_KEYS)
def test_unknown_endpoint_raises_before_any_step(key, sample_graph):
    with pytest.raises(InvalidInputError):
        run_algorithm(key, graph=sample_graph, source="A", target="Z")
    with pytest.raises(InvalidInputError):
        run_algorithm(key, graph=sample_graph, source="Q", target="F")


@pytest.mark.parametrize("key", GRAPH_KEYS)
def test_source_equals_target(key, sample_graph):
    log = run_algorithm(key, graph=sample_graph, source="C", target="C")
    assert _path(log) == ["C"]


@pytest.mark.parametrize("key", GRAPH_KEYS)
def test_path_is_a_walk_from_source_to_target(key, sample_graph):
    log = run_algorithm(key, graph=sample_graph, source="A", target="F")
    path = _path(log)

    assert path[0] == "A" and path[-1] == "F"
    assert sample_graph.is_walk(path)


@pytest.mark.parametrize("key", GRAPH_KEYS)
def test_edge_targets_name_real_edges(key, sample_graph):
    log = run_algorithm(key, graph=sample_graph, source="A", target="F")
    for e in log:
        if len(e.targets) == 2 and e.kind is not StepKind.HIGHLIGHT:
            assert sample_graph.get_edge(e.targets[1]) is not None


def test_negative_weight_rejected():
    g = Graph()
    g.create_node("A")
    g.create_node("B")
    with pytest.raises(InvalidInputError):
        g.create_edge("A", "B", -1)


def _chain(n):
    g = Graph()
    for i in range(n):
        g.create_node(f"n{i}")
    for i in range(n - 1):
        g.create_edge(f"n{i}", f"n{i + 1}")
    return g


def test_dfs_walks_the_longest_allowed_chain():
    """A chain is DFS's deepest recursion: one frame per node."""
    g = _chain(MAX_GRAPH_NODES)
    log = run_algorithm("dfs", graph=g, source="n0", target=f"n{MAX_GRAPH_NODES - 1}")
    assert len(_path(log)) == MAX_GRAPH_NODES


@pytest.mark.parametrize("key", GRAPH_KEYS)
def test_oversized_graph_rejected(key):
    g = _chain(MAX_GRAPH_NODES + 1)
    with pytest.raises(InvalidInputError):
        run_algorithm(key, graph=g, source="n0", target="n1")
