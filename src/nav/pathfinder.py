# shortest-path search over the warehouse Grid
# src/nav/pathfinder.py
"""
Uniform-cost (Dijkstra) pathfinding over Grid.

- Every step between orthogonal neighbors costs 1.
- 4-directional neighbors (north, south, west, east).
- Binary-heap frontier with lazy deletion: stale entries stay in the heap
  and are discarded on pop by the visited check.
- Stops as soon as the goal is popped.

Start/goal traversability is NOT pre-checked. A Blocked start is still
reached at distance 0 and expanded; a Blocked goal can only be reached
when it is also the start.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from .grid import Cell, Grid


log = logging.getLogger(__name__)

# Tentative distance of a cell not yet reached.
_UNREACHED = float("inf")


@dataclass
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    path: List[Cell]
    success: bool
    reason: str | None = None
    distance: int | None = None
    expanded: int = 0


@dataclass
class _SearchState:
    """Per-call search buffers. Never shared between calls."""

    distance: Dict[Cell, int] = field(default_factory=dict)
    visited: Set[Cell] = field(default_factory=set)
    predecessor: Dict[Cell, Cell] = field(default_factory=dict)
    frontier: List[Tuple[int, Cell]] = field(default_factory=list)


def search(grid: Grid, start: Cell, goal: Cell) -> PathfindingResult:
    """
    Dijkstra search for a path from start to goal on Grid.

    Returns a PathfindingResult with:
      - path: start..goal inclusive, or [] when goal is unreachable
      - success: bool
      - reason: "no_path_found" when not success
      - distance: number of steps, or None
      - expanded: cells marked visited during the search

    Raises OutOfBoundsError if start or goal lie outside the grid.
    """
    start = tuple(start)
    goal = tuple(goal)
    grid.require_in_bounds(start)
    grid.require_in_bounds(goal)

    state = _SearchState()
    state.distance[start] = 0
    heapq.heappush(state.frontier, (0, start))

    while state.frontier:
        _, current = heapq.heappop(state.frontier)

        # Goal check comes before the stale-entry check.
        if current == goal:
            break

        if current in state.visited:
            continue
        state.visited.add(current)

        for nxt in grid.neighbors_4dir(current):
            candidate = state.distance[current] + 1
            if candidate < state.distance.get(nxt, _UNREACHED):
                state.distance[nxt] = candidate
                state.predecessor[nxt] = current
                heapq.heappush(state.frontier, (candidate, nxt))

    expanded = len(state.visited)

    if goal not in state.distance:
        log.debug(
            "No path from %s to %s (expanded=%d)", start, goal, expanded
        )
        return PathfindingResult(
            path=[],
            success=False,
            reason="no_path_found",
            expanded=expanded,
        )

    path = _reconstruct_path(state.predecessor, start, goal)
    log.debug(
        "Path from %s to %s: %d steps (expanded=%d)",
        start,
        goal,
        state.distance[goal],
        expanded,
    )
    return PathfindingResult(
        path=path,
        success=True,
        distance=state.distance[goal],
        expanded=expanded,
    )


def find_path(grid: Grid, start: Cell, goal: Cell) -> List[Cell]:
    """
    Return the shortest start -> goal path as a list of cells.

    Empty list when the goal is unreachable; [start] when start == goal.
    """
    return search(grid, start, goal).path


def _reconstruct_path(
    predecessor: Dict[Cell, Cell],
    start: Cell,
    goal: Cell,
) -> List[Cell]:
    """Walk predecessor links from goal back to start, then reverse."""
    path: List[Cell] = []
    current = goal
    while current != start:
        path.append(current)
        current = predecessor[current]
    path.append(start)
    path.reverse()
    return path
