"""
edge.py — Directed Weighted Edge
=================================
Connects two nodes in one direction and carries a numeric weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - The id is derived: "source-target".  Step events name edges by this
    id, so it must stay stable for the lifetime of a run.
"""

from typing import Any, Dict, Tuple

from errors import InvalidInputError
from graph.node import as_number


class Edge:
    """
    Attributes:
        source : ID of the tail node.
        target : ID of the head node.
        weight : Non-negative cost (default 1).
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: str, target: str, weight: float = 1.0):
        self.source: str   = source
        self.target: str   = target
        self.weight: float = weight

    @property
    def id(self) -> str:
        return f"{self.source}-{self.target}"

    @property
    def pair(self) -> Tuple[str, str]:
        return (self.source, self.target)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        if not isinstance(data, dict):
            raise InvalidInputError(f"Edge must be an object, got {data!r}")
        # accept both the {from, to} and {source, target} spellings
        source = data.get("from", data.get("source"))
        target = data.get("to", data.get("target"))
        if source is None or target is None:
            raise InvalidInputError(f"Edge needs both endpoints: {data!r}")
        weight = as_number(data.get("weight", 1.0), f"Edge {source}-{target} weight")
        return cls(source=str(source), target=str(target), weight=weight)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.pair == other.pair
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash(self.pair)
