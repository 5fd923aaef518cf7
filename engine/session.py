"""
session.py — One Visualizer Session
====================================
Glue between a selection (algorithm + input), the StepLog it produced
and the PlaybackCursor walking that log.  The Flask host keeps one of
these per browser session; tests drive it directly.

    s = VisualizerSession()
    s.select("dijkstra")           # default sample graph, A → F
    s.cursor.step_forward()
    s.snapshot()                   # JSON-ready frame for the renderer

Changing the algorithm or the input always goes through select(), which
runs the algorithm first and only then swaps log + cursor in one go.  A
rejected input therefore leaves the previous run on screen untouched.
"""

import logging
import random
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence

from algorithms import get_algorithm
from config import (
    ARRAY_VALUE_RANGE,
    DEFAULT_GRAPH,
    DEFAULT_SOURCE,
    DEFAULT_TARGET,
    INITIAL_ARRAY_SIZE,
    MAX_ARRAY_SIZE,
)
from engine.explain import Backend, explain_step
from engine.reconstruct import reconstruct_graph, reconstruct_grid, reconstruct_linear
from engine.recorder import StepLog, run_algorithm, summarize
from engine.stepper import PlaybackCursor
from errors import InvalidInputError, UnsupportedAlgorithmError
from graph import Graph, Lattice

logger = logging.getLogger(__name__)


def random_values(size: int = INITIAL_ARRAY_SIZE, seed: Optional[int] = None) -> List[int]:
    """A fresh unsorted array of `size` ints in ARRAY_VALUE_RANGE."""
    if not 0 <= size <= MAX_ARRAY_SIZE:
        raise InvalidInputError(f"Array size must be between 0 and {MAX_ARRAY_SIZE}, got {size}")
    rng = random.Random(seed)
    lo, hi = ARRAY_VALUE_RANGE
    return [rng.randint(lo, hi) for _ in range(size)]


class VisualizerSession:
    """
    Attributes:
        algo_key : Currently selected algorithm (None before select()).
        values   : Last array input; reused when only the algorithm changes.
        graph    : Last graph input (sample graph by default).
        source / target : Endpoints for graph runs.
        lattice  : Set when the current run is on a grid.
        log      : StepLog of the current selection.
        cursor   : The PlaybackCursor over `log`.
    """

    def __init__(self, seed: Optional[int] = None):
        self.algo_key: Optional[str]     = None
        self.values:   List[Any]         = random_values(seed=seed)
        self.graph:    Graph             = Graph.from_dict(DEFAULT_GRAPH)
        self.source:   str               = DEFAULT_SOURCE
        self.target:   str               = DEFAULT_TARGET
        self.search_value: Any           = None
        self.lattice:  Optional[Lattice] = None
        self.log:      Optional[StepLog] = None
        self.cursor = PlaybackCursor()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(
        self,
        algo_key: str,
        values: Optional[Sequence[Any]] = None,
        *,
        search_value: Any = None,
        graph: Optional[Graph] = None,
        source: Optional[str] = None,
        target: Optional[str] = None,
        lattice: Optional[Lattice] = None,
    ) -> StepLog:
        """Run `algo_key` on the given (or remembered) input and reset playback."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnsupportedAlgorithmError(algo_key)

        if info.is_array:
            values = list(values) if values is not None else list(self.values)
            log = run_algorithm(algo_key, values, search_value=search_value)
            self.values = values
            self.search_value = log.target
            self.lattice = None
        elif lattice is not None:
            log = run_algorithm(algo_key, lattice=lattice)
            self.lattice = lattice
        else:
            graph = graph if graph is not None else self.graph
            source = source if source is not None else self.source
            target = target if target is not None else self.target
            log = run_algorithm(algo_key, graph=graph, source=source, target=target)
            self.graph, self.source, self.target = graph, source, target
            self.lattice = None

        self.algo_key = algo_key
        self.log = log
        self.cursor.load(log)
        logger.debug("session selected %s", algo_key)
        return log

    def shuffle(self, size: int = INITIAL_ARRAY_SIZE, seed: Optional[int] = None) -> StepLog:
        """New random array, same array algorithm."""
        if self.algo_key is None or not get_algorithm(self.algo_key).is_array:
            raise InvalidInputError("Shuffling needs an array algorithm selected")
        return self.select(self.algo_key, random_values(size, seed))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    @property
    def view_kind(self) -> str:
        if self.log is None:
            return "none"
        if get_algorithm(self.log.algo_key).is_array:
            return "linear"
        return "grid" if self.lattice is not None else "graph"

    def view(self) -> Any:
        """Reconstructed state at the cursor, or None before the first select()."""
        if self.log is None:
            return None
        pos = self.cursor.position
        kind = self.view_kind
        if kind == "linear":
            return reconstruct_linear(self.log, pos)
        if kind == "grid":
            return reconstruct_grid(self.log, pos, self.lattice)
        return reconstruct_graph(self.log, pos)

    def snapshot(self) -> Dict[str, Any]:
        cur = self.cursor
        frame: Dict[str, Any] = {
            "algo_key":    self.algo_key,
            "position":    cur.position,
            "total_steps": len(self.log) if self.log is not None else 0,
            "state":       cur.state.value,
            "is_playing":  cur.is_playing,
            "speed":       cur.speed,
            "delay":       cur.delay,
            "view_kind":   self.view_kind,
        }
        if self.log is None:
            return frame

        event = cur.current_event
        info = get_algorithm(self.log.algo_key)
        frame.update(
            category=self.log.category,
            pseudocode=list(info.pseudocode),
            event=event.to_dict() if event else None,
            line=event.line if event else None,
            view=self.view().to_dict(),
            metrics=asdict(summarize(self.log)),
        )
        if self.view_kind == "linear":
            frame["search_value"] = self.search_value
        elif self.view_kind == "grid":
            frame["lattice"] = self.lattice.to_dict()
        else:
            frame["graph"] = self.graph.to_dict()
            frame["source"], frame["target"] = self.source, self.target
        return frame

    # ------------------------------------------------------------------
    # Explanation
    # ------------------------------------------------------------------
    def explain(self, backend: Backend) -> str:
        if self.log is None:
            raise InvalidInputError("Run an algorithm before asking for an explanation")
        return explain_step(self.log, self.cursor.position, backend)

    def close(self) -> None:
        self.cursor.close()
        self.log = None
