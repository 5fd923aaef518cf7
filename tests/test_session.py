"""
Tests for VisualizerSession: selection swaps log + cursor wholesale, and
snapshots carry the right view for each category.
"""

import pytest

from config import INITIAL_ARRAY_SIZE, MAX_ARRAY_SIZE
from engine import VisualizerSession, random_values
from errors import InvalidInputError, UnsupportedAlgorithmError
from graph import Lattice


def test_random_values_are_seeded_and_in_range():
    a = random_values(seed=7)
    assert a == random_values(seed=7)
    assert len(a) == INITIAL_ARRAY_SIZE
    assert all(1 <= v <= 100 for v in a)
    with pytest.raises(InvalidInputError):
        random_values(-1)
    with pytest.raises(InvalidInputError):
        random_values(MAX_ARRAY_SIZE + 1)


def test_fresh_session_snapshot():
    s = VisualizerSession(seed=1)
    snap = s.snapshot()

    assert snap["view_kind"] == "none"
    assert snap["total_steps"] == 0
    assert snap["position"] == -1


def test_select_graph_algorithm_uses_sample_graph():
    s = VisualizerSession(seed=1)
    log = s.select("dijkstra")

    assert log.source == "A" and log.target == "F"
    assert s.cursor.log is log
    assert s.view_kind == "graph"


def test_select_resets_cursor():
    s = VisualizerSession(seed=1)
    s.select("quicksort", [5, 3, 8, 4])
    s.cursor.seek(3)
    s.cursor.play()

    s.select("bubblesort")
    assert s.cursor.position == -1
    assert not s.cursor.is_playing
    assert s.log.initial == (5, 3, 8, 4)


def test_rejected_input_keeps_previous_run():
    s = VisualizerSession(seed=1)
    first = s.select("bfs")
    s.cursor.seek(2)

    with pytest.raises(InvalidInputError):
        s.select("dijkstra", source="Z")
    with pytest.raises(UnsupportedAlgorithmError):
        s.select("nope")

    assert s.log is first
    assert s.cursor.position == 2
    assert s.source == "A"


def test_linear_snapshot():
    s = VisualizerSession(seed=1)
    s.select("quicksort", [5, 3, 8, 4])
    s.cursor.step_forward()
    snap = s.snapshot()

    assert snap["view_kind"] == "linear"
    assert snap["event"]["kind"] == "mark_pivot"
    assert snap["line"] == 2
    assert snap["view"]["pivot_index"] == 3
    assert snap["metrics"]["total_steps"] == snap["total_steps"]


def test_search_snapshot_reports_target():
    s = VisualizerSession(seed=1)
    s.select("binarysearch", [4, 8, 15, 16, 23, 42], search_value=23)
    assert s.snapshot()["search_value"] == 23


def test_grid_snapshot():
    s = VisualizerSession(seed=1)
    lattice = Lattice(rows=3, cols=4, start=(0, 0), end=(2, 3), walls={"1-1"})
    s.select("astar", lattice=lattice)
    s.cursor.jump_to_end()
    snap = s.snapshot()

    assert snap["view_kind"] == "grid"
    assert snap["lattice"]["walls"] == ["1-1"]
    assert snap["view"]["cells"][1][1]["is_wall"]
    assert snap["metrics"]["path_found"]


def test_switching_from_grid_back_to_array():
    s = VisualizerSession(seed=1)
    s.select("bfs", lattice=Lattice(rows=2, cols=2, start=(0, 0), end=(1, 1)))
    s.select("mergesort", [2, 1])
    assert s.view_kind == "linear"
    assert s.lattice is None


def test_shuffle_requires_array_algorithm():
    s = VisualizerSession(seed=1)
    s.select("dfs")
    with pytest.raises(InvalidInputError):
        s.shuffle()

    s.select("heapsort")
    log = s.shuffle(size=5, seed=3)
    assert len(log.initial) == 5


def test_explain_through_session():
    s = VisualizerSession(seed=1)
    with pytest.raises(InvalidInputError):
        s.explain(lambda p: "x")

    s.select("bubblesort", [2, 1])
    s.cursor.step_forward()
    assert s.explain(lambda p: "Comparing neighbours.") == "Comparing neighbours."
