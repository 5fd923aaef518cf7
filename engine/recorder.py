"""
recorder.py — Run Entry Point & Analytics
==========================================
Runs one algorithm over one input, eagerly, to completion, and wraps the
drained events in a StepLog together with everything replay needs:
the category tag and the initial (pre-run) input.

Usage:
    log = run_algorithm("dijkstra", graph=g, source="A", target="F")
    len(log)                 # number of steps
    metrics = summarize(log) # the analytics card

A StepLog is created once per (algorithm, input) selection and replaced
wholesale when either changes; it is never edited.
"""

import logging
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from algorithms import PATHFINDING, SEARCH, AlgoInfo, StepEvent, StepKind, get_algorithm
from algorithms.binary_search import default_target
from algorithms.inputs import as_values
from errors import InvalidInputError, UnsupportedAlgorithmError
from graph import Graph, Lattice

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# StepLog
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StepLog:
    """
    Attributes:
        algo_key : Registry key of the algorithm that produced the log.
        category : sorting / search / pathfinding — tells reconstructors
                   what a HIGHLIGHT means without scanning the log.
        initial  : Tuple of array values before step 0, or the Graph.
        events   : The recorded steps; events[i].index == i.
        source   : Start node id (graph runs only).
        target   : Goal node id (graph runs) or searched value (search runs).
    """

    algo_key: str
    category: str
    initial:  Union[Tuple[Real, ...], Graph]
    events:   Tuple[StepEvent, ...]
    source:   Optional[str] = None
    target:   Any           = None

    def __len__(self) -> int:
        return len(self.events)

    def __getitem__(self, idx: int) -> StepEvent:
        return self.events[idx]

    def __iter__(self) -> Iterator[StepEvent]:
        return iter(self.events)

    @property
    def last_index(self) -> int:
        return len(self.events) - 1

    def has_kind(self, kind: StepKind) -> bool:
        return any(e.kind is kind for e in self.events)

    def to_dict(self) -> Dict[str, Any]:
        initial = self.initial.to_dict() if isinstance(self.initial, Graph) else list(self.initial)
        return {
            "algo_key": self.algo_key,
            "category": self.category,
            "initial":  initial,
            "source":   self.source,
            "target":   self.target,
            "steps":    [e.to_dict() for e in self.events],
        }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def run_algorithm(
    algo_key: str,
    values: Optional[Sequence[Real]] = None,
    *,
    search_value: Optional[Real] = None,
    graph: Optional[Graph] = None,
    source: Optional[str] = None,
    target: Optional[str] = None,
    lattice: Optional[Lattice] = None,
) -> StepLog:
    """
    One pure entry point for every registered algorithm.

    Array algorithms take `values` (and binary search an optional
    `search_value`).  Graph algorithms take `graph` + `source` + `target`,
    or a `lattice`, whose start / end fill in missing endpoints.

    Raises:
        UnsupportedAlgorithmError : unknown key.
        InvalidInputError         : input shape does not match the category,
                                    or the algorithm rejected it.
    """
    info = get_algorithm(algo_key)
    if info is None:
        raise UnsupportedAlgorithmError(algo_key)

    if info.is_array:
        log = _run_array(info, values, search_value)
    else:
        log = _run_graph(info, graph, source, target, lattice)

    logger.info("ran %s: %d step(s)", info.key, len(log))
    return log


def _run_array(info: AlgoInfo, values, search_value) -> StepLog:
    if values is None:
        raise InvalidInputError(f"{info.label} needs an array input")
    initial = tuple(info.prepare(values)) if info.prepare else tuple(as_values(values))
    if info.category == SEARCH:
        if search_value is None:
            search_value = default_target(initial)
        events = info.fn(list(initial), search_value)
        return StepLog(info.key, info.category, initial, events, target=search_value)
    return StepLog(info.key, info.category, initial, info.fn(list(initial)))


def _run_graph(info: AlgoInfo, graph, source, target, lattice) -> StepLog:
    if lattice is not None:
        graph = graph or lattice.to_graph()
        source = source if source is not None else lattice.start_id
        target = target if target is not None else lattice.end_id
    if graph is None:
        raise InvalidInputError(f"{info.label} needs a graph input")
    if source is None or target is None:
        raise InvalidInputError(f"{info.label} needs both a start and a goal node")
    working = graph.copy()
    events = info.fn(working, source, target)
    return StepLog(info.key, info.category, working, events, source=source, target=target)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:       str   = ""
    algo_label:     str   = ""
    category:       str   = ""
    total_steps:    int   = 0
    kind_counts:    Dict[str, int] = field(default_factory=dict)
    nodes_visited:  int   = 0
    path:           List[str] = field(default_factory=list)
    path_length:    int   = 0          # number of edges on the final path
    path_cost:      float = 0.0        # total weight of the final path
    path_found:     bool  = False
    goal_reachable: Optional[bool] = None   # from the graph alone, not the run
    found_index:    Optional[int]  = None


def summarize(log: StepLog) -> RunMetrics:
    """Count what happened in a finished run."""
    info = get_algorithm(log.algo_key)
    counts: Dict[str, int] = {}
    for e in log:
        counts[e.kind.value] = counts.get(e.kind.value, 0) + 1

    metrics = RunMetrics(
        algo_key=log.algo_key,
        algo_label=info.label if info else "",
        category=log.category,
        total_steps=len(log),
        kind_counts=counts,
    )

    if log.category == PATHFINDING:
        graph = log.initial
        metrics.goal_reachable = graph.reachable(log.source, log.target)
        metrics.nodes_visited = len({e.targets[0] for e in log if e.kind is StepKind.VISIT})
        highlights = [e for e in log if e.kind is StepKind.HIGHLIGHT]
        if highlights:
            path = [str(t) for t in highlights[-1].targets]
            if graph.is_walk(path):
                metrics.path = path
                metrics.path_length = len(path) - 1
                metrics.path_cost = graph.path_cost(path)
                metrics.path_found = True
    else:
        found = [e for e in log if e.kind is StepKind.FOUND]
        if found:
            metrics.found_index = found[-1].targets[0]
    return metrics
