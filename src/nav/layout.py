# seeding + rendering of warehouse floor layouts
# src/nav/layout.py
"""
Layout helpers for Grid.

Grid itself is immutable and has no notion of where obstacles come from.
This module is the seeding side:
- grid_from_rows: explicit 0/1 rows (config files, tests)
- random_layout: seeded random obstacle field
- render_layout: plain-text view of a grid, optionally with a path overlay
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence, Set

from .grid import Cell, Grid


log = logging.getLogger(__name__)

OPEN_CHAR = "."
BLOCKED_CHAR = "#"
PATH_CHAR = "*"


def grid_from_rows(rows: Sequence[Sequence[int]]) -> Grid:
    """Thin alias for Grid.from_rows (0 = Open, non-zero = Blocked)."""
    return Grid.from_rows(rows)


def random_layout(
    rows: int,
    cols: int,
    *,
    obstacle_probability: float = 0.5,
    seed: Optional[int] = None,
    keep_open: Iterable[Cell] = (),
) -> Grid:
    """
    Generate a Grid where each cell is Blocked with obstacle_probability.

    A private random.Random(seed) is used so callers get reproducible
    layouts without touching the global RNG. Cells listed in keep_open
    are forced Open (e.g. a dock or a start position).
    """
    if not 0.0 <= obstacle_probability <= 1.0:
        raise ValueError(
            f"obstacle_probability must be in [0, 1], got {obstacle_probability}"
        )

    # Validates dimensions before we draw anything.
    empty = Grid(rows=rows, cols=cols)

    forced: Set[Cell] = set()
    for cell in keep_open:
        cell = tuple(cell)
        empty.require_in_bounds(cell)
        forced.add(cell)

    rng = random.Random(seed)
    blocked: List[Cell] = []
    for r in range(rows):
        for c in range(cols):
            # Draw for every cell so keep_open does not shift the sequence.
            hit = rng.random() < obstacle_probability
            if hit and (r, c) not in forced:
                blocked.append((r, c))

    log.debug(
        "Generated %dx%d layout: %d blocked cells (p=%.2f, seed=%r)",
        rows,
        cols,
        len(blocked),
        obstacle_probability,
        seed,
    )
    return Grid(rows=rows, cols=cols, blocked=frozenset(blocked))


def render_layout(grid: Grid, path: Iterable[Cell] = ()) -> str:
    """
    Render the grid as text, one line per row.

    '.' Open, '#' Blocked, '*' cell on the given path (drawn over blocks,
    so a Blocked start is still visible).
    """
    on_path = {tuple(cell) for cell in path}
    lines: List[str] = []
    for r in range(grid.rows):
        chars: List[str] = []
        for c in range(grid.cols):
            if (r, c) in on_path:
                chars.append(PATH_CHAR)
            elif (r, c) in grid.blocked:
                chars.append(BLOCKED_CHAR)
            else:
                chars.append(OPEN_CHAR)
        lines.append("".join(chars))
    return "\n".join(lines)
