# tests/test_nav_pathfinder.py
"""
Unit tests for the Grid pathfinder.

Covers:
- optimality against an independent BFS
- unreachable goals and walls
- start == goal (including on a Blocked cell)
- bounds errors
- path contiguity
"""

from __future__ import annotations

from typing import List

import pytest

from nav import Cell, Grid, OutOfBoundsError, find_path, open_cells, random_layout, search


def assert_contiguous(path: List[Cell], start: Cell, goal: Cell) -> None:
    assert path[0] == start
    assert path[-1] == goal
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_open_3x3_corner_to_corner() -> None:
    grid = Grid(rows=3, cols=3)

    path = find_path(grid, (0, 0), (2, 2))

    assert len(path) == 5
    assert_contiguous(path, (0, 0), (2, 2))


def test_wall_splits_grid_returns_empty() -> None:
    grid = Grid.from_rows(
        [
            [0, 1, 0],
            [0, 1, 0],
            [0, 1, 0],
        ]
    )

    assert find_path(grid, (0, 0), (0, 2)) == []

    result = search(grid, (0, 0), (0, 2))
    assert not result.success
    assert result.reason == "no_path_found"
    assert result.distance is None


def test_unique_shortest_path_is_exact() -> None:
    # Single corridor: only one shortest route exists.
    grid = Grid.from_rows(
        [
            [0, 0, 0, 0],
            [1, 1, 1, 0],
            [0, 0, 0, 0],
        ]
    )

    path = find_path(grid, (0, 0), (2, 0))

    assert path == [
        (0, 0), (0, 1), (0, 2), (0, 3),
        (1, 3),
        (2, 3), (2, 2), (2, 1), (2, 0),
    ]


def test_start_equals_goal_returns_single_cell() -> None:
    grid = Grid.from_rows([[0, 1], [0, 0]])

    assert find_path(grid, (1, 1), (1, 1)) == [(1, 1)]
    # Blocked cell: still the identity path.
    assert find_path(grid, (0, 1), (0, 1)) == [(0, 1)]

    result = search(grid, (0, 1), (0, 1))
    assert result.success
    assert result.distance == 0


def test_blocked_start_still_expands() -> None:
    grid = Grid.from_rows(
        [
            [1, 0, 0],
            [0, 0, 0],
        ]
    )

    path = find_path(grid, (0, 0), (0, 2))

    assert len(path) == 3
    assert_contiguous(path, (0, 0), (0, 2))


def test_blocked_goal_is_unreachable() -> None:
    grid = Grid.from_rows(
        [
            [0, 0, 1],
            [0, 0, 0],
        ]
    )

    assert find_path(grid, (0, 0), (0, 2)) == []


def test_path_never_enters_blocked_cells() -> None:
    grid = Grid.from_rows(
        [
            [0, 0, 0, 0, 0],
            [0, 1, 1, 1, 0],
            [0, 0, 0, 1, 0],
            [1, 1, 0, 1, 0],
            [0, 0, 0, 0, 0],
        ]
    )

    path = find_path(grid, (2, 2), (4, 0))

    assert_contiguous(path, (2, 2), (4, 0))
    assert len(path) - 1 == 4
    for cell in path:
        assert cell not in grid.blocked


@pytest.mark.parametrize(
    "start, goal",
    [
        ((3, 0), (0, 0)),
        ((0, 0), (0, 3)),
        ((-1, 0), (0, 0)),
        ((0, 0), (0, -1)),
    ],
)
def test_out_of_bounds_raises(start: Cell, goal: Cell) -> None:
    grid = Grid(rows=3, cols=3)

    with pytest.raises(OutOfBoundsError):
        find_path(grid, start, goal)


def test_out_of_bounds_error_is_index_error() -> None:
    grid = Grid(rows=2, cols=2)

    with pytest.raises(IndexError) as excinfo:
        find_path(grid, (5, 5), (0, 0))

    assert excinfo.value.cell == (5, 5)
    assert excinfo.value.dimensions == (2, 2)


def test_repeated_calls_return_same_path() -> None:
    grid = random_layout(8, 8, obstacle_probability=0.2, seed=11, keep_open=[(0, 0), (7, 7)])

    first = find_path(grid, (0, 0), (7, 7))
    for _ in range(5):
        assert find_path(grid, (0, 0), (7, 7)) == first


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_optimal_against_bfs_for_all_pairs(seed: int, bfs_distance) -> None:
    grid = random_layout(5, 6, obstacle_probability=0.3, seed=seed)
    cells = list(open_cells(grid))

    for start in cells:
        for goal in cells:
            expected = bfs_distance(grid, start, goal)
            path = find_path(grid, start, goal)
            if expected is None:
                assert path == []
            else:
                assert len(path) - 1 == expected
                assert_contiguous(path, start, goal)


def test_search_reports_distance_and_expansion() -> None:
    grid = Grid(rows=1, cols=5)

    result = search(grid, (0, 0), (0, 4))

    assert result.success
    assert result.distance == 4
    assert result.path == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]
    # Goal is popped before being marked visited.
    assert result.expanded == 4


def test_accepts_list_coordinates() -> None:
    grid = Grid(rows=2, cols=2)

    assert find_path(grid, [0, 0], [1, 0]) == [(0, 0), (1, 0)]
