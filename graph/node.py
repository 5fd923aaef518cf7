import math
from numbers import Real
from typing import Any, Dict

from errors import InvalidInputError


def as_number(value: Any, what: str) -> float:
    """`value` if it is a finite real (bools excluded), else InvalidInputError."""
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidInputError(f"{what} must be a finite number, got {value!r}")
    return value


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Immutable identity (id) plus a fixed position.

    Attributes:
        id   : Unique identifier, also the label shown on the canvas.
        x, y : Fixed canvas coordinates.  A* measures straight-line
               distance between these, so they are part of the input,
               not just layout.
    """

    __slots__ = ("id", "x", "y")

    def __init__(self, node_id: str, x: float = 0.0, y: float = 0.0):
        self.id: str  = node_id
        self.x: float = x
        self.y: float = y

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def distance_to(self, other: "Node") -> float:
        """Euclidean distance — the A* heuristic before scaling."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        if not isinstance(data, dict) or data.get("id") is None:
            raise InvalidInputError(f"Node needs an id: {data!r}")
        nid = str(data["id"])
        return cls(
            node_id=nid,
            x=as_number(data.get("x", 0.0), f"Node {nid} x"),
            y=as_number(data.get("y", 0.0), f"Node {nid} y"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Node)
            and self.id == other.id
            and self.x == other.x
            and self.y == other.y
        )

    def __hash__(self) -> int:
        return hash(self.id)
