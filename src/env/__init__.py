# src/env/__init__.py
"""
Configuration layer: YAML warehouse profiles resolved into dataclasses.
"""

from __future__ import annotations

from .schema import ItemPlacement, WarehouseConfig
from .loader import load_warehouse_config

__all__ = [
    "ItemPlacement",
    "WarehouseConfig",
    "load_warehouse_config",
]
