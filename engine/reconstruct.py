"""
reconstruct.py — Replay Folds
==============================
Given a StepLog and a cursor, rebuild exactly what an observer would see
if the algorithm had been paused right after step `cursor`, without
re-running it.

    reconstruct_linear(log, cursor)          → LinearState
    reconstruct_graph(log, cursor)           → GraphState
    reconstruct_grid(log, cursor, lattice)   → GridState

Every fold follows the same recipe:
  1. start from the log's initial input (cursor -1 stops here)
  2. for each event 0..cursor in order:
       clear the transient active sets, then apply the event
  3. freeze what accumulated and return it

Folds always start from scratch.  No state survives between calls, so
seeking backwards, forwards or twice to the same cursor gives the same
snapshot, and two folds over one log can run in any order.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from algorithms import SORTING, StepEvent, StepKind
from engine.recorder import StepLog
from engine.state import GraphState, GridCell, GridState, LinearState
from errors import CursorOutOfRangeError
from graph import Graph, Lattice, cell_id, parse_cell_id

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _prefix(log: StepLog, cursor: int) -> Tuple[StepEvent, ...]:
    if not -1 <= cursor < len(log):
        raise CursorOutOfRangeError(cursor, len(log))
    logger.debug("folding %s up to step %d of %d", log.algo_key, cursor, len(log))
    return log.events[:cursor + 1]


def cost_of(value: Any) -> Optional[float]:
    """Numeric label carried by a value: the number itself, or f of a cost breakdown."""
    if isinstance(value, Mapping):
        return value.get("f")
    return value


def _edge_pair(graph: Graph, eid: Any) -> Optional[Tuple[str, str]]:
    # node ids may contain "-" (lattice cells), so ask the graph first
    edge = graph.get_edge(eid) if isinstance(eid, str) else None
    if edge is not None:
        return edge.pair
    if isinstance(eid, str) and "-" in eid:
        source, target = eid.split("-", 1)
        return (source, target)
    return None


# ---------------------------------------------------------------------------
# Linear (array) fold
# ---------------------------------------------------------------------------
def reconstruct_linear(log: StepLog, cursor: int) -> LinearState:
    """
    Fold a sort / search log.  HIGHLIGHT means "sorted" for sorting runs
    and "ruled out" for search runs; the log's category decides which.
    """
    events = _prefix(log, cursor)

    values: List[Any] = list(log.initial)
    active: Set[int]  = set()
    pivot:  Optional[int] = None
    sorted_idx:    Set[int] = set()
    discarded_idx: Set[int] = set()
    found:  Optional[int] = None
    highlight_into = sorted_idx if log.category == SORTING else discarded_idx

    for event in events:
        active.clear()
        kind, targets = event.kind, event.targets

        if kind is StepKind.COMPARE:
            active.update(targets)
        elif kind is StepKind.SWAP:
            if len(targets) == 2:
                a, b = targets
                values[a], values[b] = values[b], values[a]
            active.update(targets)
        elif kind is StepKind.UPDATE_VALUE:
            idx = targets[0]
            if event.value is not None:
                values[idx] = event.value
            active.add(idx)
        elif kind is StepKind.MARK_PIVOT:
            pivot = targets[0]
            active.add(pivot)
        elif kind is StepKind.HIGHLIGHT:
            highlight_into.update(targets)
        elif kind is StepKind.FOUND:
            found = targets[0]
            active.add(found)

    return LinearState(
        values=tuple(values),
        active_indices=frozenset(active),
        pivot_index=pivot,
        sorted_indices=frozenset(sorted_idx),
        discarded_indices=frozenset(discarded_idx),
        found_index=found,
    )


# ---------------------------------------------------------------------------
# Graph fold
# ---------------------------------------------------------------------------
class _GraphFold:
    """Mutable scratch-pad for one graph fold.  Lives only inside one call."""

    def __init__(self, graph: Graph):
        self.graph = graph
        self.visited:      Set[str]              = set()
        self.active_nodes: Set[str]              = set()
        self.active_edges: Set[Tuple[str, str]]  = set()
        self.path_nodes:   List[str]             = []
        self.path_edges:   Set[Tuple[str, str]]  = set()
        self.distances:    Dict[str, Any]        = {}

    def clear_transient(self) -> None:
        self.active_nodes.clear()
        self.active_edges.clear()

    def touch(self, event: StepEvent, label: bool) -> None:
        """Mark the event's node (and edge, if any) active; optionally take its label."""
        node = event.targets[0]
        self.active_nodes.add(node)
        if len(event.targets) > 1:
            pair = _edge_pair(self.graph, event.targets[1])
            if pair is not None:
                self.active_edges.add(pair)
        if label and event.value is not None:
            self.distances[node] = cost_of(event.value)

    def apply(self, event: StepEvent) -> None:
        kind = event.kind
        if kind is StepKind.VISIT:
            self.visited.add(event.targets[0])
            self.touch(event, label=True)
        elif kind is StepKind.UPDATE_VALUE:
            self.touch(event, label=True)
        elif kind is StepKind.COMPARE:
            self.touch(event, label=False)
        elif kind is StepKind.HIGHLIGHT:
            path = [str(t) for t in event.targets]
            self.path_nodes.extend(path)
            self.path_edges.update(zip(path, path[1:]))


def reconstruct_graph(log: StepLog, cursor: int) -> GraphState:
    events = _prefix(log, cursor)
    fold = _GraphFold(log.initial)
    for event in events:
        fold.clear_transient()
        fold.apply(event)
    return GraphState(
        visited_nodes=frozenset(fold.visited),
        active_nodes=frozenset(fold.active_nodes),
        active_edges=frozenset(fold.active_edges),
        path_nodes=frozenset(fold.path_nodes),
        path_edges=frozenset(fold.path_edges),
        distances=MappingProxyType(dict(fold.distances)),
    )


# ---------------------------------------------------------------------------
# Grid fold
# ---------------------------------------------------------------------------
def reconstruct_grid(log: StepLog, cursor: int, lattice: Lattice) -> GridState:
    """
    Fold a lattice run.  Walls and start / end come from `lattice`, not
    from the log; targets are "row-col" cell ids (edge ids are ignored).
    """
    events = _prefix(log, cursor)

    cells: Dict[Tuple[int, int], Dict[str, Any]] = {
        (r, c): {
            "is_wall":    lattice.is_wall(r, c),
            "is_start":   (r, c) == lattice.start,
            "is_end":     (r, c) == lattice.end,
            "is_visited": False,
            "is_path":    False,
            "cost_label": None,
        }
        for r, c in lattice.cells()
    }
    active: Set[str] = set()

    for event in events:
        active.clear()
        hits = []
        for t in event.targets:
            parsed = parse_cell_id(t)
            if parsed is not None and parsed in cells:
                hits.append(parsed)
                active.add(cell_id(*parsed))

        if not hits:
            continue
        kind = event.kind
        if kind is StepKind.VISIT:
            cell = cells[hits[0]]
            cell["is_visited"] = True
            if event.value is not None:
                cell["cost_label"] = cost_of(event.value)
        elif kind is StepKind.UPDATE_VALUE:
            if event.value is not None:
                cells[hits[0]]["cost_label"] = cost_of(event.value)
        elif kind is StepKind.HIGHLIGHT:
            for rc in hits:
                cells[rc]["is_path"] = True

    matrix = tuple(
        tuple(GridCell(row=r, col=c, **cells[(r, c)]) for c in range(lattice.cols))
        for r in range(lattice.rows)
    )
    return GridState(cells=matrix, active_cells=frozenset(active))
