"""
state.py — Reconstructed State Snapshots
=========================================
What the renderer needs to draw one frame.  Every snapshot is frozen:
sets are frozensets and the distance map is a read-only proxy, so a
snapshot handed to a view can never leak changes back into a later fold.

Transient members (active_*) describe only the step at the cursor.
Cumulative members (sorted / discarded / visited / path) accrete over the
whole prefix.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple


def _empty_mapping() -> Mapping[str, float]:
    return MappingProxyType({})


def _json_number(v: Any) -> Any:
    # JSON has no infinity; an unreached node has no label
    return None if v == float("inf") else v


@dataclass(frozen=True)
class LinearState:
    """Array view for sorts and binary search."""

    values:            Tuple[Any, ...]   = ()
    active_indices:    FrozenSet[int]    = frozenset()
    pivot_index:       Optional[int]     = None
    sorted_indices:    FrozenSet[int]    = frozenset()
    discarded_indices: FrozenSet[int]    = frozenset()
    found_index:       Optional[int]     = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values":            list(self.values),
            "active_indices":    sorted(self.active_indices),
            "pivot_index":       self.pivot_index,
            "sorted_indices":    sorted(self.sorted_indices),
            "discarded_indices": sorted(self.discarded_indices),
            "found_index":       self.found_index,
        }


@dataclass(frozen=True, eq=False)
class GraphState:
    """
    Node / edge view for traversal and shortest-path runs.  Compared by
    value (distances as a plain dict); not hashable.
    """

    visited_nodes: FrozenSet[str]              = frozenset()
    active_nodes:  FrozenSet[str]              = frozenset()
    active_edges:  FrozenSet[Tuple[str, str]]  = frozenset()
    path_nodes:    FrozenSet[str]              = frozenset()
    path_edges:    FrozenSet[Tuple[str, str]]  = frozenset()
    distances:     Mapping[str, float]         = field(default_factory=_empty_mapping)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GraphState):
            return NotImplemented
        return (
            self.visited_nodes == other.visited_nodes
            and self.active_nodes == other.active_nodes
            and self.active_edges == other.active_edges
            and self.path_nodes == other.path_nodes
            and self.path_edges == other.path_edges
            and dict(self.distances) == dict(other.distances)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visited_nodes": sorted(self.visited_nodes),
            "active_nodes":  sorted(self.active_nodes),
            "active_edges":  sorted(list(e) for e in self.active_edges),
            "path_nodes":    sorted(self.path_nodes),
            "path_edges":    sorted(list(e) for e in self.path_edges),
            "distances":     {k: _json_number(v) for k, v in self.distances.items()},
        }


@dataclass(frozen=True)
class GridCell:
    row:        int
    col:        int
    is_wall:    bool            = False
    is_start:   bool            = False
    is_end:     bool            = False
    is_visited: bool            = False
    is_path:    bool            = False
    cost_label: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "row":        self.row,
            "col":        self.col,
            "is_wall":    self.is_wall,
            "is_start":   self.is_start,
            "is_end":     self.is_end,
            "is_visited": self.is_visited,
            "is_path":    self.is_path,
            "cost_label": _json_number(self.cost_label),
        }


@dataclass(frozen=True)
class GridState:
    """Per-cell matrix for lattice runs, rows of columns."""

    cells:        Tuple[Tuple[GridCell, ...], ...] = ()
    active_cells: FrozenSet[str]                   = frozenset()

    def cell(self, row: int, col: int) -> GridCell:
        return self.cells[row][col]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cells":        [[c.to_dict() for c in row] for row in self.cells],
            "active_cells": sorted(self.active_cells),
        }
