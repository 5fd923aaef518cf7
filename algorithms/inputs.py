"""
inputs.py — Input checks shared by the algorithms
==================================================
Every check runs before the first event is recorded, so a bad input
never produces a half-built log.
"""

import math
from numbers import Real
from typing import Dict, List, Optional, Sequence

from config import MAX_ARRAY_SIZE, MAX_GRAPH_NODES
from errors import InvalidInputError
from graph import Graph


def is_number(v) -> bool:
    """A finite real that is not a bool."""
    return not isinstance(v, bool) and isinstance(v, Real) and math.isfinite(v)


def as_values(values: Sequence[Real]) -> List[Real]:
    """Private working copy of an array input.  The caller's list is never touched."""
    if values is None:
        raise InvalidInputError("An array input is required")
    working = list(values)
    if len(working) > MAX_ARRAY_SIZE:
        raise InvalidInputError(f"Array has {len(working)} elements, the limit is {MAX_ARRAY_SIZE}")
    for i, v in enumerate(working):
        if not is_number(v):
            raise InvalidInputError(f"Element {i} is not a finite number: {v!r}")
    return working


def check_endpoints(graph: Graph, source: str, target: str) -> None:
    if graph is None:
        raise InvalidInputError("A graph input is required")
    if graph.node_count() > MAX_GRAPH_NODES:
        raise InvalidInputError(
            f"Graph has {graph.node_count()} nodes, the limit is {MAX_GRAPH_NODES}"
        )
    for name, nid in (("start", source), ("goal", target)):
        if not graph.has_node(nid):
            raise InvalidInputError(f"Unknown {name} node: {nid!r}")


def walk_back(parent: Dict[str, Optional[str]], target: str) -> List[str]:
    """Follow the predecessor map from target back to the root, then reverse."""
    path: List[str] = []
    cur: Optional[str] = target
    while cur is not None:
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return path
