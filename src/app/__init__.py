# src/app/__init__.py
"""
Application layer for the warehouse tools.

Exposes:
- SmartWarehouse: Grid + ItemIndex + pathfinder wiring
- configure_logging: one-shot root logger setup for entrypoints
"""

from __future__ import annotations

from .logging_config import configure_logging
from .warehouse import SmartWarehouse

__all__ = [
    "SmartWarehouse",
    "configure_logging",
]
