# tests/conftest.py

from __future__ import annotations

import sys
from collections import deque
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

# Ensure src/ is on sys.path for test imports like `import nav`, `import inventory`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from nav import Cell, Grid  # noqa: E402


def _bfs_distance(grid: Grid, start: Cell, goal: Cell) -> Optional[int]:
    """Plain BFS reference; treats start as entered regardless of blockage."""
    dist: Dict[Cell, int] = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == goal:
            return dist[cur]
        r, c = cur
        for nxt in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if grid.in_bounds(nxt) and nxt not in grid.blocked and nxt not in dist:
                dist[nxt] = dist[cur] + 1
                queue.append(nxt)
    return None


@pytest.fixture
def bfs_distance() -> Callable[[Grid, Cell, Cell], Optional[int]]:
    """Independent shortest-distance reference for path length checks."""
    return _bfs_distance
