# src/inventory/__init__.py
"""
Inventory subsystem: Item values and the name-ordered ItemIndex.
"""

from __future__ import annotations

from .schema import Item
from .index import ItemIndex

__all__ = [
    "Item",
    "ItemIndex",
]
