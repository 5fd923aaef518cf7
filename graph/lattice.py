"""
lattice.py — 2-D Grid with Walls
=================================
A fixed rows × cols lattice, a set of wall cells, and fixed start / end
cells.  The lattice is the caller's static input: it is never encoded in
a step log, so the grid reconstructor receives it alongside the log.

Cell ids are "row-col" strings, e.g. "3-7".  to_graph() turns the open
cells into a Graph with 4-connected unit-weight edges in both directions,
which every pathfinding algorithm can then run on unchanged.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional, Tuple

from config import CELL_SIZE, MAX_GRAPH_NODES
from errors import InvalidInputError
from graph.graph import Graph


Cell = Tuple[int, int]

# neighbour order of every lattice run: right, down, left, up
DIRECTIONS: Tuple[Cell, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def cell_id(row: int, col: int) -> str:
    return f"{row}-{col}"


def parse_cell_id(cid: Any) -> Optional[Cell]:
    """(row, col) for a "row-col" id, or None for anything else (edge ids, ints)."""
    if not isinstance(cid, str):
        return None
    parts = cid.split("-")
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _whole(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"Lattice {what} must be an integer, got {value!r}")
    return value


def _cell(value: Any, what: str) -> Cell:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise InvalidInputError(f"Lattice {what} must be [row, col], got {value!r}")
    return _whole(value[0], what), _whole(value[1], what)


@dataclass(frozen=True)
class Lattice:
    """
    Attributes:
        rows, cols : Lattice size.
        walls      : Cell ids that cannot be entered.
        start, end : (row, col) of the start and end cells.
    """

    rows:  int
    cols:  int
    start: Cell
    end:   Cell
    walls: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidInputError(f"Lattice must be at least 1x1, got {self.rows}x{self.cols}")
        if self.rows * self.cols > MAX_GRAPH_NODES:
            raise InvalidInputError(
                f"Lattice {self.rows}x{self.cols} has more than {MAX_GRAPH_NODES} cells"
            )
        object.__setattr__(self, "start", tuple(self.start))
        object.__setattr__(self, "end", tuple(self.end))
        object.__setattr__(self, "walls", frozenset(self.walls))
        for name, cell in (("start", self.start), ("end", self.end)):
            if not self.contains(*cell):
                raise InvalidInputError(f"{name} cell {cell} lies outside the lattice")
            if cell_id(*cell) in self.walls:
                raise InvalidInputError(f"{name} cell {cell} is a wall")
        for wid in self.walls:
            parsed = parse_cell_id(wid)
            if parsed is None or not self.contains(*parsed):
                raise InvalidInputError(f"Wall {wid!r} is not a cell of the lattice")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def start_id(self) -> str:
        return cell_id(*self.start)

    @property
    def end_id(self) -> str:
        return cell_id(*self.end)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_wall(self, row: int, col: int) -> bool:
        return cell_id(row, col) in self.walls

    def cells(self) -> Iterator[Cell]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    # ------------------------------------------------------------------
    # Editing (returns a new lattice; the old one stays valid for its log)
    # ------------------------------------------------------------------
    def with_walls(self, walls: Iterable[str]) -> "Lattice":
        return Lattice(self.rows, self.cols, self.start, self.end, frozenset(walls))

    def toggle_wall(self, cid: str) -> "Lattice":
        if cid in (self.start_id, self.end_id):
            return self
        walls = set(self.walls)
        walls.symmetric_difference_update({cid})
        return self.with_walls(walls)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to_graph(self) -> Graph:
        """Open cells become nodes at (col, row) × CELL_SIZE; walls are left out."""
        g = Graph()
        for r, c in self.cells():
            if not self.is_wall(r, c):
                g.create_node(cell_id(r, c), x=c * CELL_SIZE, y=r * CELL_SIZE)
        for r, c in self.cells():
            if self.is_wall(r, c):
                continue
            for dr, dc in DIRECTIONS:
                nr, nc = r + dr, c + dc
                if self.contains(nr, nc) and not self.is_wall(nr, nc):
                    g.create_edge(cell_id(r, c), cell_id(nr, nc), weight=1)
        return g

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "start": list(self.start),
            "end":   list(self.end),
            "walls": sorted(self.walls),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Lattice":
        if not isinstance(data, dict):
            raise InvalidInputError(f"Lattice must be an object, got {data!r}")
        rows, cols = _whole(data.get("rows"), "rows"), _whole(data.get("cols"), "cols")
        walls = data.get("walls", [])
        if not isinstance(walls, list) or not all(isinstance(w, str) for w in walls):
            raise InvalidInputError("Lattice walls must be a list of \"row-col\" ids")
        return cls(
            rows=rows,
            cols=cols,
            start=_cell(data.get("start", (0, 0)), "start"),
            end=_cell(data.get("end", (rows - 1, cols - 1)), "end"),
            walls=frozenset(walls),
        )
