"""
Tests for Graph and Lattice construction, validation and serialisation.
"""

import pytest

from config import DEFAULT_LATTICE, MAX_GRAPH_NODES
from errors import InvalidInputError
from graph import Edge, Graph, Lattice, Node, cell_id, parse_cell_id


def test_sample_graph_shape(sample_graph):
    assert sample_graph.node_count() == 8
    assert sample_graph.edge_count() == 12
    assert sample_graph.node_ids()[:2] == ["A", "B"]
    assert [n for n, _ in sample_graph.neighbours("G")] == ["D", "E", "H"]


def test_graph_round_trip(sample_graph):
    assert Graph.from_dict(sample_graph.to_dict()) == sample_graph
    assert sample_graph.copy() == sample_graph
    assert sample_graph.copy() is not sample_graph


def test_duplicate_node_and_edge_rejected():
    g = Graph()
    g.create_node("A")
    g.create_node("B")
    g.create_edge("A", "B")
    with pytest.raises(InvalidInputError):
        g.create_node("A")
    with pytest.raises(InvalidInputError):
        g.create_edge("A", "B", 2)
    with pytest.raises(InvalidInputError):
        g.create_edge("A", "Z")


def test_edge_ids_and_spellings():
    e = Edge.from_dict({"source": "A", "target": "B", "weight": 2})
    assert e.id == "A-B"
    assert e.pair == ("A", "B")
    assert e.to_dict() == {"from": "A", "to": "B", "weight": 2}


def test_path_cost_and_walk(sample_graph):
    assert sample_graph.path_cost(["A", "B", "D", "F"]) == 12
    assert not sample_graph.is_walk(["A", "F"])
    with pytest.raises(InvalidInputError):
        sample_graph.path_cost(["A", "F"])


def test_reachable(sample_graph):
    assert sample_graph.reachable("A", "F")
    assert not sample_graph.reachable("F", "A")


def test_cell_ids():
    assert cell_id(3, 7) == "3-7"
    assert parse_cell_id("3-7") == (3, 7)
    assert parse_cell_id("0-0-0-1") is None
    assert parse_cell_id("A") is None
    assert parse_cell_id(4) is None


def test_default_lattice():
    lat = Lattice.from_dict(DEFAULT_LATTICE)

    assert (lat.rows, lat.cols) == (10, 15)
    assert lat.start_id == "4-2" and lat.end_id == "4-12"
    assert lat.is_wall(4, 7)
    assert Lattice.from_dict(lat.to_dict()) == lat


def test_lattice_graph_skips_walls():
    lat = Lattice(rows=2, cols=2, start=(0, 0), end=(1, 1), walls={"0-1"})
    g = lat.to_graph()

    assert g.node_ids() == ["0-0", "1-0", "1-1"]
    assert [n for n, _ in g.neighbours("0-0")] == ["1-0"]
    assert g.get_edge("1-0-1-1").weight == 1


@pytest.mark.parametrize("kwargs", [
    {"rows": 0, "cols": 3, "start": (0, 0), "end": (0, 1)},
    {"rows": 2, "cols": 2, "start": (0, 0), "end": (5, 5)},
    {"rows": 2, "cols": 2, "start": (0, 0), "end": (1, 1), "walls": {"0-0"}},
    {"rows": 2, "cols": 2, "start": (0, 0), "end": (1, 1), "walls": {"9-9"}},
])
def test_invalid_lattice_rejected(kwargs):
    with pytest.raises(InvalidInputError):
        Lattice(**kwargs)


def test_toggle_wall_keeps_endpoints_open():
    lat = Lattice(rows=2, cols=2, start=(0, 0), end=(1, 1))
    assert lat.toggle_wall("0-0") is lat
    walled = lat.toggle_wall("0-1")
    assert walled.is_wall(0, 1)
    assert not walled.toggle_wall("0-1").is_wall(0, 1)


@pytest.mark.parametrize("data", [
    ["A"],
    "A-B",
    {"nodes": "AB"},
    {"nodes": [{"id": "A"}], "edges": ["A-B"]},
    {"nodes": [["A", 0, 0]]},
    {"nodes": [{"x": 1}]},
    {"nodes": [{"id": "A", "x": "left"}]},
    {"nodes": [{"id": "A", "y": True}]},
    {"nodes": [{"id": "A", "x": float("nan")}]},
    {"nodes": [{"id": "A"}, {"id": "B"}], "edges": [{"from": "A"}]},
    {"nodes": [{"id": "A"}, {"id": "B"}], "edges": [{"from": "A", "to": "B", "weight": "3"}]},
    {"nodes": [{"id": "A"}, {"id": "B"}], "edges": [{"from": "A", "to": "B", "weight": float("inf")}]},
])
def test_malformed_graph_rejected(data):
    with pytest.raises(InvalidInputError):
        Graph.from_dict(data)


def test_node_defaults_to_origin():
    n = Node.from_dict({"id": 7})
    assert (n.id, n.x, n.y) == ("7", 0.0, 0.0)


@pytest.mark.parametrize("data", [
    ["rows", 3],
    {"rows": "3", "cols": 3},
    {"rows": 3},
    {"rows": 3, "cols": 3, "start": "00"},
    {"rows": 3, "cols": 3, "start": [0, 0, 0]},
    {"rows": 3, "cols": 3, "walls": "1-1"},
    {"rows": 3, "cols": 3, "walls": [{"r": 1}]},
])
def test_malformed_lattice_rejected(data):
    with pytest.raises(InvalidInputError):
        Lattice.from_dict(data)


def test_oversized_lattice_rejected():
    with pytest.raises(InvalidInputError):
        Lattice(rows=MAX_GRAPH_NODES + 1, cols=1, start=(0, 0), end=(1, 0))
    assert Lattice(rows=MAX_GRAPH_NODES, cols=1, start=(0, 0), end=(1, 0)).rows == MAX_GRAPH_NODES
