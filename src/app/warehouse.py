# src/app/warehouse.py
"""
SmartWarehouse: one floor Grid plus its ItemIndex.

This is the wiring layer callers use:
    add_item(item, cell)          -> stock an item at a cell
    find_item(name)               -> Item | None
    item_locations(name)          -> cells where name was stocked
    find_optimal_path(start, goal) -> list of cells (possibly empty)
    plan_route(start, goal)       -> full PathfindingResult

The grid never changes after construction. The index does, and is not
thread-safe; callers sharing a SmartWarehouse must serialize add_item.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from env.schema import WarehouseConfig
from inventory import Item, ItemIndex
from nav import Cell, Grid, PathfindingResult, random_layout, search


log = logging.getLogger(__name__)


class SmartWarehouse:
    """Facade over Grid, ItemIndex and the pathfinder."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._index = ItemIndex(grid)

    @classmethod
    def from_config(cls, config: WarehouseConfig) -> "SmartWarehouse":
        """
        Build the floor from a resolved WarehouseConfig and stock its items.

        An explicit layout is used as-is; otherwise a seeded random layout
        is drawn with config.keep_open forced Open.
        """
        if config.layout is not None:
            grid = Grid.from_rows(config.layout)
        else:
            grid = random_layout(
                config.rows,
                config.cols,
                obstacle_probability=config.obstacle_probability,
                seed=config.seed,
                keep_open=config.keep_open,
            )

        warehouse = cls(grid)
        for placement in config.items:
            warehouse.add_item(
                Item(name=placement.name, quantity=placement.quantity),
                placement.cell,
            )
        return warehouse

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def index(self) -> ItemIndex:
        return self._index

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def add_item(self, item: Item, cell: Cell) -> None:
        self._index.insert(item, cell)
        log.info("Stocked %s x%d at %s", item.name, item.quantity, tuple(cell))

    def find_item(self, name: str) -> Optional[Item]:
        item = self._index.find_by_name(name)
        if item is None:
            log.debug("Item %r not found", name)
        return item

    def item_locations(self, name: str) -> List[Cell]:
        return self._index.locations_of(name)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def plan_route(self, start: Cell, goal: Cell) -> PathfindingResult:
        result = search(self._grid, start, goal)
        if result.success:
            log.info(
                "Route %s -> %s: %d steps, %d cells expanded",
                tuple(start),
                tuple(goal),
                result.distance,
                result.expanded,
            )
        else:
            log.info(
                "No route %s -> %s (%s)", tuple(start), tuple(goal), result.reason
            )
        return result

    def find_optimal_path(self, start: Cell, goal: Cell) -> List[Cell]:
        return self.plan_route(start, goal).path
