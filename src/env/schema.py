# WarehouseConfig + ItemPlacement dataclasses
# src/env/schema.py

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class ItemPlacement:
    """One item to stock at startup."""
    name: str
    quantity: int
    cell: Tuple[int, int]  # (row, col)


@dataclass
class WarehouseConfig:
    """Resolved warehouse floor for one active profile."""
    name: str
    rows: int
    cols: int
    obstacle_probability: float = 0.5
    seed: Optional[int] = None
    layout: Optional[List[List[int]]] = None        # explicit 0/1 rows; overrides random
    keep_open: List[Tuple[int, int]] = field(default_factory=list)
    items: List[ItemPlacement] = field(default_factory=list)
