"""
step.py — Step Event Vocabulary
================================
Every instrumented algorithm emits StepEvents while it runs, and every
reconstructor folds them back into a picture of the algorithm paused at
one instant.  This module is the contract both sides agree on.

    • StepKind   – the closed set of things that can happen in one step
    • StepEvent  – one atomic, immutable fact about the run
    • TraceRecorder – append-only log builder every algorithm writes to

Design decisions:
  - StepEvent is a frozen dataclass.  Once the recorder hands it out,
    nobody rewrites it; `index` is assigned by the recorder, never by
    the algorithm.
  - `targets` is a tuple of array indices (int) or node / cell ids (str).
    Its meaning depends on `kind` (see StepKind).
  - `value` is opaque to the recorder.  Sorts put numbers there, A* puts
    a {"g", "h", "f"} breakdown.  Only reconstructors interpret it.
  - `description` and `line` are display-only; replay never reads them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union


Target = Union[int, str]


# ---------------------------------------------------------------------------
# Step kinds — closed set; adding one means teaching every reconstructor
# ---------------------------------------------------------------------------
class StepKind(Enum):
    COMPARE      = "compare"        # two cells / entities compared
    SWAP         = "swap"           # two cells exchanged, or one placement finalised
    VISIT        = "visit"          # node dequeued / expanded / selected as current
    MARK_PIVOT   = "mark_pivot"     # a sort designates its pivot
    UPDATE_VALUE = "update_value"   # cell overwritten, or tentative distance improved
    HIGHLIGHT    = "highlight"      # final path, sorted region or discarded region
    MESSAGE      = "message"        # narrative only (start, backtrack)
    FOUND        = "found"          # a search located its target


def edge_id(source: str, target: str) -> str:
    """Identifier of the directed edge source → target as it appears in targets."""
    return f"{source}-{target}"


# ---------------------------------------------------------------------------
# StepEvent
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StepEvent:
    """
    Attributes:
        index       : 0-based position in the log, contiguous, recorder-assigned.
        kind        : What happened (StepKind).
        targets     : Indices / ids the event is about, in meaningful order.
        description : Plain-English sentence for the explanation panel.
        value       : Optional payload (number, or structured cost for A*).
        line        : Optional 0-based index into the algorithm's PSEUDOCODE.
    """

    index:        int
    kind:         StepKind
    targets:      Tuple[Target, ...]
    description:  str           = ""
    value:        Any           = None
    line:         Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        value = self.value
        if isinstance(value, dict):
            value = dict(value)
        return {
            "index":       self.index,
            "kind":        self.kind.value,
            "targets":     list(self.targets),
            "description": self.description,
            "value":       value,
            "line":        self.line,
        }


# ---------------------------------------------------------------------------
# TraceRecorder — the only writer algorithms talk to
# ---------------------------------------------------------------------------
class TraceRecorder:
    """
    Append-only, auto-indexing buffer of StepEvents.

    Usage inside an algorithm:
        rec = TraceRecorder()
        rec.record(StepKind.COMPARE, [0, 1], "Comparing 3 and 1", line=2)
        ...
        return rec.drain()

    The recorder knows nothing about any algorithm.  Events are never
    removed or reordered, and drain() may be called exactly once, after
    the algorithm's control flow has finished.
    """

    def __init__(self):
        self._events:  List[StepEvent] = []
        self._drained: bool            = False

    def record(
        self,
        kind: StepKind,
        targets: Sequence[Target],
        description: str,
        value: Any = None,
        line: Optional[int] = None,
    ) -> StepEvent:
        if self._drained:
            raise RuntimeError("Recorder already drained; start a new run.")
        event = StepEvent(
            index=len(self._events),
            kind=kind,
            targets=tuple(targets),
            description=description,
            value=value,
            line=line,
        )
        self._events.append(event)
        return event

    def drain(self) -> Tuple[StepEvent, ...]:
        """Hand over the finished log.  A second call is a programming error."""
        if self._drained:
            raise RuntimeError("Recorder already drained.")
        self._drained = True
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)
