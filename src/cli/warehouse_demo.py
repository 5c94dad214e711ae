# src/cli/warehouse_demo.py

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from app import SmartWarehouse, configure_logging
from env.loader import load_warehouse_config
from nav import render_layout


log = logging.getLogger(__name__)


def _parse_cell(text: str) -> Tuple[int, int]:
    """Parse 'R,C' into (R, C)."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected ROW,COL, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected integers in {text!r}") from exc


def _parse_log_level(text: str) -> str:
    """Accept a standard logging level name, case-insensitive."""
    name = text.upper()
    if not isinstance(logging.getLevelName(name), int):
        raise argparse.ArgumentTypeError(f"Unknown log level {text!r}")
    return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Stock a warehouse floor, look up an item and route across the floor."
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to warehouse.yaml")
    parser.add_argument("--profile", default=None, help="Profile name (from warehouse.yaml)")
    parser.add_argument("--find", default="Laptop", help="Item name to look up")
    parser.add_argument("--start", type=_parse_cell, default=(0, 0), help="Start cell ROW,COL")
    parser.add_argument("--goal", type=_parse_cell, default=(8, 8), help="Goal cell ROW,COL")
    parser.add_argument(
        "--log-level",
        type=_parse_log_level,
        default="INFO",
        help="Logging level (DEBUG, INFO, ...)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_warehouse_config(profile=args.profile, path=args.config)
        warehouse = SmartWarehouse.from_config(config)
        item = warehouse.find_item(args.find)
        path = warehouse.find_optimal_path(args.start, args.goal)
    except (OSError, ValueError, KeyError, IndexError):
        log.exception("Warehouse demo failed")
        return 1

    if item is not None:
        print(f"Found item: {item.name} (Quantity: {item.quantity})")
    else:
        print("Found item: Not found")

    print(f"Optimal path from {args.start} to {args.goal}:")
    print(render_layout(warehouse.grid, path))
    print(json.dumps({"path": [list(cell) for cell in path]}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
