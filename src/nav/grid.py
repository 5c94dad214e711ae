# immutable occupancy grid for the warehouse floor
# src/nav/grid.py
"""
Grid: read-only occupancy map of the warehouse floor.

This module only:
- Stores which cells are Open and which are Blocked.
- Answers bounds and traversability queries.
- Encodes cells to/from the row-major linear offset used by the inventory.

Seeding obstacles (random or from a file) belongs to nav.layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Sequence, Tuple

# (row, col) integer coordinates
Cell = Tuple[int, int]

# North, south, west, east. No diagonals.
DIRECTIONS_4: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(eq=False)
class OutOfBoundsError(IndexError):
    """
    Raised when a coordinate lies outside [0, rows) x [0, cols).

    Callers are expected to pass valid coordinates; there is no recovery path.
    """

    cell: Cell
    dimensions: Tuple[int, int]

    def __str__(self) -> str:
        rows, cols = self.dimensions
        return f"OutOfBoundsError(cell={self.cell!r}, grid={rows}x{cols})"


@dataclass(frozen=True)
class Grid:
    """
    Rectangular floor map, fixed at construction.

    Responsibilities:
    - Provide bounds checks (in_bounds, require_in_bounds).
    - Provide traversability tests (is_traversable).
    - Provide neighbor cells for pathfinding.

    It does NOT:
    - Mutate after construction.
    - Know anything about items or search state.
    """

    rows: int
    cols: int
    blocked: FrozenSet[Cell] = frozenset()

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(
                f"Grid dimensions must be non-negative, got {self.rows}x{self.cols}"
            )
        if self.rows == 0 and self.cols == 0:
            raise ValueError("Grid must have at least one non-zero dimension.")

        # Accept any iterable of cells, store a frozenset.
        blocked = frozenset(tuple(c) for c in self.blocked)
        for cell in blocked:
            if not self.in_bounds(cell):
                raise OutOfBoundsError(cell=cell, dimensions=self.dimensions())
        object.__setattr__(self, "blocked", blocked)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """
        Build a grid from a list of rows where 0 = Open, anything else = Blocked.

        Rows must all have the same length.
        """
        if not rows:
            raise ValueError("Layout must contain at least one row.")

        width = len(rows[0])
        blocked: List[Cell] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Layout is not rectangular: row {r} has {len(row)} cells, "
                    f"expected {width}"
                )
            for c, value in enumerate(row):
                if value:
                    blocked.append((r, c))

        return cls(rows=len(rows), cols=width, blocked=frozenset(blocked))

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def dimensions(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def require_in_bounds(self, cell: Cell) -> None:
        """Raise OutOfBoundsError unless cell is on the grid."""
        if not self.in_bounds(cell):
            raise OutOfBoundsError(cell=tuple(cell), dimensions=self.dimensions())

    def is_traversable(self, cell: Cell) -> bool:
        """
        Return True if the cell is Open.

        Raises OutOfBoundsError for coordinates outside the grid.
        """
        self.require_in_bounds(cell)
        return tuple(cell) not in self.blocked

    def neighbors_4dir(self, cell: Cell) -> List[Cell]:
        """
        Return in-bounds Open neighbors in north, south, west, east order.

        The cell itself is not checked, so a Blocked cell still has neighbors.
        """
        r, c = cell
        out: List[Cell] = []
        for dr, dc in DIRECTIONS_4:
            nxt = (r + dr, c + dc)
            if self.in_bounds(nxt) and nxt not in self.blocked:
                out.append(nxt)
        return out

    def blocked_cells(self) -> List[Cell]:
        return sorted(self.blocked)

    # ------------------------------------------------------------------
    # Linear encoding (row-major)
    # ------------------------------------------------------------------

    def offset_of(self, cell: Cell) -> int:
        self.require_in_bounds(cell)
        r, c = cell
        return r * self.cols + c

    def cell_at(self, offset: int) -> Cell:
        if self.cols == 0 or not 0 <= offset < self.rows * self.cols:
            raise IndexError(f"Offset {offset} outside grid {self.rows}x{self.cols}")
        return divmod(offset, self.cols)


def open_cells(grid: Grid) -> Iterable[Cell]:
    """Yield every Open cell in row-major order."""
    for r in range(grid.rows):
        for c in range(grid.cols):
            if (r, c) not in grid.blocked:
                yield (r, c)
