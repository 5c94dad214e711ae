# src/nav/__init__.py
"""
Navigation subsystem for the warehouse floor.

Provides:
- Grid: immutable occupancy map with bounds-checked queries
- OutOfBoundsError: raised for coordinates outside the grid
- find_path / search: uniform-cost shortest path on a Grid
- random_layout / grid_from_rows / render_layout: layout seeding and display
"""

from __future__ import annotations

from .grid import Cell, Grid, OutOfBoundsError, open_cells
from .pathfinder import PathfindingResult, find_path, search
from .layout import grid_from_rows, random_layout, render_layout

__all__ = [
    "Cell",
    "Grid",
    "OutOfBoundsError",
    "open_cells",
    "PathfindingResult",
    "find_path",
    "search",
    "grid_from_rows",
    "random_layout",
    "render_layout",
]
