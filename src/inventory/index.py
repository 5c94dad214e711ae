# src/inventory/index.py
"""
ItemIndex: name-ordered registry of Items and where they were placed.

Responsibility:
  - Keep every inserted Item in a list sorted by name (stable for
    duplicates: a later insert lands after existing equal names).
  - Record each placement as a row-major offset under the item's name.
  - Binary-search lookup by exact name.

Duplicate names are kept as distinct entries. find_by_name returns the
leftmost match, which is the earliest inserted of the duplicates; use
find_all to see every one of them.

Not thread-safe. Callers sharing an index must serialize inserts.
"""

from __future__ import annotations

import bisect
import logging
from typing import Dict, Iterator, List, Optional

from nav.grid import Cell, Grid

from .schema import Item


log = logging.getLogger(__name__)


class ItemIndex:
    """Sorted item collection plus name -> placement offsets."""

    def __init__(self, grid: Grid) -> None:
        # Only used for bounds checks and the offset encoding.
        self._grid = grid

        # Parallel lists: _names[i] is _items[i].name, kept for bisect.
        self._items: List[Item] = []
        self._names: List[str] = []

        self._locations: Dict[str, List[int]] = {}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, item: Item, cell: Cell) -> None:
        """
        Add item and record cell's offset under item.name.

        Raises OutOfBoundsError if cell is outside the indexed grid.
        """
        offset = self._grid.offset_of(cell)

        pos = bisect.bisect_right(self._names, item.name)
        self._names.insert(pos, item.name)
        self._items.insert(pos, item)

        self._locations.setdefault(item.name, []).append(offset)
        log.debug("Inserted %r at %s (offset=%d)", item.name, tuple(cell), offset)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_by_name(self, name: str) -> Optional[Item]:
        """Return the leftmost item with this exact name, or None."""
        pos = bisect.bisect_left(self._names, name)
        if pos < len(self._names) and self._names[pos] == name:
            return self._items[pos]
        return None

    def find_all(self, name: str) -> List[Item]:
        """Every item with this exact name, in insertion order."""
        lo = bisect.bisect_left(self._names, name)
        hi = bisect.bisect_right(self._names, name)
        return self._items[lo:hi]

    def offsets_of(self, name: str) -> List[int]:
        return list(self._locations.get(name, []))

    def locations_of(self, name: str) -> List[Cell]:
        """Decoded placements for name, in insertion order."""
        return [self._grid.cell_at(offset) for offset in self._locations.get(name, [])]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find_by_name(name) is not None
