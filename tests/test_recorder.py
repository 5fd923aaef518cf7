"""
Tests for the step vocabulary, the TraceRecorder and run_algorithm.
"""

import pytest

from algorithms import REGISTRY, StepKind, TraceRecorder, get_algorithm, list_algorithms
from engine import StepLog, run_algorithm
from errors import InvalidInputError, UnsupportedAlgorithmError


def test_recorder_assigns_contiguous_indices():
    """Indices are 0..n-1 in recording order."""
    rec = TraceRecorder()
    rec.record(StepKind.COMPARE, [0, 1], "a")
    rec.record(StepKind.SWAP, [0, 1], "b")
    rec.record(StepKind.HIGHLIGHT, [0, 1], "c")
    events = rec.drain()

    assert [e.index for e in events] == [0, 1, 2]
    assert [e.kind for e in events] == [StepKind.COMPARE, StepKind.SWAP, StepKind.HIGHLIGHT]


def test_recorder_copies_targets_into_tuple():
    """Mutating the caller's target list after recording changes nothing."""
    rec = TraceRecorder()
    targets = [3, 4]
    rec.record(StepKind.COMPARE, targets, "x")
    targets.append(5)

    assert rec.drain()[0].targets == (3, 4)


def test_recorder_drains_once():
    """A second drain, or recording after drain, is a programming error."""
    rec = TraceRecorder()
    rec.record(StepKind.MESSAGE, ["A"], "start")
    rec.drain()

    with pytest.raises(RuntimeError):
        rec.drain()
    with pytest.raises(RuntimeError):
        rec.record(StepKind.MESSAGE, ["A"], "again")


def test_empty_recorder_drains_empty_log():
    assert TraceRecorder().drain() == ()


def test_step_event_to_dict():
    rec = TraceRecorder()
    rec.record(StepKind.UPDATE_VALUE, ["B", "A-B"], "relax", value=4, line=9)
    d = rec.drain()[0].to_dict()

    assert d == {
        "index": 0,
        "kind": "update_value",
        "targets": ["B", "A-B"],
        "description": "relax",
        "value": 4,
        "line": 9,
    }


def test_registry_lists_every_algorithm():
    keys = [a.key for a in list_algorithms()]
    assert keys == [
        "quicksort", "bubblesort", "selectionsort", "insertionsort", "mergesort",
        "heapsort", "binarysearch", "bfs", "dfs", "dijkstra", "astar",
    ]
    assert get_algorithm("nope") is None
    assert all(info.pseudocode for info in REGISTRY.values())


def test_unknown_algorithm_raises():
    with pytest.raises(UnsupportedAlgorithmError) as exc:
        run_algorithm("bogosort", [1, 2])
    assert "bogosort" in str(exc.value)
    assert isinstance(exc.value, ValueError)


def test_run_leaves_caller_input_untouched(sample_graph):
    """Algorithms work on private copies of arrays and graphs."""
    values = [4, 2, 3, 1]
    run_algorithm("quicksort", values)
    assert values == [4, 2, 3, 1]

    before = sample_graph.to_dict()
    run_algorithm("dijkstra", graph=sample_graph, source="A", target="F")
    assert sample_graph.to_dict() == before


def test_run_is_deterministic(sample_graph):
    """Same algorithm + same input gives the same log."""
    a = run_algorithm("astar", graph=sample_graph, source="A", target="F")
    b = run_algorithm("astar", graph=sample_graph, source="A", target="F")
    assert a.events == b.events

    assert run_algorithm("heapsort", [9, 1, 8, 2]).events == run_algorithm("heapsort", [9, 1, 8, 2]).events


def test_step_log_carries_initial_input_and_category():
    log = run_algorithm("bubblesort", [3, 1, 2])

    assert isinstance(log, StepLog)
    assert log.initial == (3, 1, 2)
    assert log.category == "sorting"
    assert log.last_index == len(log) - 1
    assert all(e.index == i for i, e in enumerate(log))


def test_array_algorithm_without_array_raises():
    with pytest.raises(InvalidInputError):
        run_algorithm("mergesort")


def test_non_numeric_array_rejected():
    with pytest.raises(InvalidInputError):
        run_algorithm("bubblesort", [1, "two", 3])


def test_graph_algorithm_without_graph_raises():
    with pytest.raises(InvalidInputError):
        run_algorithm("bfs", source="A", target="F")


def test_step_log_to_dict_is_json_shaped(sample_graph):
    d = run_algorithm("bfs", graph=sample_graph, source="A", target="F").to_dict()

    assert d["algo_key"] == "bfs"
    assert d["initial"]["nodes"][0]["id"] == "A"
    assert d["steps"][0]["kind"] == "message"
