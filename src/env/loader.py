# src/env/loader.py
"""
Warehouse config loader.

Reads config/warehouse.yaml:

    profile: demo
    profiles:
      demo:
        rows: 10
        cols: 10
        obstacle_probability: 0.5
        seed: 7
        layout: null
        keep_open: [[0, 0], [8, 8]]
        items:
          - {name: Book, quantity: 50, cell: [2, 3]}

and resolves the active profile into a WarehouseConfig. No grid is built
here; app.warehouse owns that.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .schema import ItemPlacement, WarehouseConfig


log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Tests monkeypatch this to point at a temp dir.
CONFIG_DIR = PROJECT_ROOT / "config"

DEFAULT_CONFIG_NAME = "warehouse.yaml"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from path."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _select_profile(
    cfg: Dict[str, Any],
    requested: Optional[str],
) -> Tuple[str, Dict[str, Any]]:
    """Return (active_profile_name, active_profile_mapping)."""
    profile_name = requested or cfg.get("profile")
    if not profile_name:
        raise ValueError("warehouse.yaml must define a 'profile' key.")
    profiles = cfg.get("profiles")
    if not isinstance(profiles, dict):
        raise ValueError("warehouse.yaml must define a 'profiles' mapping.")
    if profile_name not in profiles:
        raise KeyError(f"Profile '{profile_name}' not found in warehouse.yaml profiles.")
    profile = profiles[profile_name]
    if not isinstance(profile, dict):
        raise ValueError(f"Profile '{profile_name}' must be a mapping.")
    return profile_name, profile


def _as_int(value: Any, what: str) -> int:
    """int(value), with None and other garbage reported as ValueError."""
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{what} must be an integer, got {value!r}") from exc


def _as_float(value: Any, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{what} must be a number, got {value!r}") from exc


def _as_cell(value: Any, what: str) -> Tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{what} must be a [row, col] pair, got {value!r}")
    return _as_int(value[0], what), _as_int(value[1], what)


def _parse_items(raw: Any) -> List[ItemPlacement]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"'items' must be a list, got {type(raw)}")

    items: List[ItemPlacement] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or "name" not in entry or "cell" not in entry:
            raise ValueError(f"items[{i}] must be a mapping with 'name' and 'cell'")
        items.append(
            ItemPlacement(
                name=str(entry["name"]),
                quantity=_as_int(entry.get("quantity", 0), f"items[{i}].quantity"),
                cell=_as_cell(entry["cell"], f"items[{i}].cell"),
            )
        )
    return items


def _parse_layout(raw: Any) -> Optional[List[List[int]]]:
    if raw is None:
        return None
    if not isinstance(raw, list) or not all(isinstance(row, list) for row in raw):
        raise ValueError("'layout' must be a list of rows")
    if not raw:
        raise ValueError("'layout' must contain at least one row")
    return [
        [_as_int(v, f"layout[{r}][{c}]") for c, v in enumerate(row)]
        for r, row in enumerate(raw)
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_warehouse_config(
    profile: Optional[str] = None,
    path: Optional[Path] = None,
) -> WarehouseConfig:
    """
    Main entry point: returns the resolved WarehouseConfig.

    Args:
        profile: profile name; defaults to the file's 'profile' key
        path: explicit YAML path; defaults to CONFIG_DIR / warehouse.yaml
    """
    cfg_path = Path(path) if path is not None else CONFIG_DIR / DEFAULT_CONFIG_NAME
    cfg = _load_yaml(cfg_path)

    profile_name, raw = _select_profile(cfg, profile)

    layout = _parse_layout(raw.get("layout"))
    if layout is not None:
        # Explicit layout wins; dimensions come from it.
        rows = len(layout)
        cols = len(layout[0])
    else:
        if "rows" not in raw or "cols" not in raw:
            raise ValueError(
                f"Profile '{profile_name}' needs either 'layout' or 'rows' and 'cols'."
            )
        rows = _as_int(raw["rows"], "rows")
        cols = _as_int(raw["cols"], "cols")

    seed = raw.get("seed")
    config = WarehouseConfig(
        name=profile_name,
        rows=rows,
        cols=cols,
        obstacle_probability=_as_float(
            raw.get("obstacle_probability", 0.5), "obstacle_probability"
        ),
        seed=_as_int(seed, "seed") if seed is not None else None,
        layout=layout,
        keep_open=[
            _as_cell(c, f"keep_open[{i}]")
            for i, c in enumerate(raw.get("keep_open") or [])
        ],
        items=_parse_items(raw.get("items")),
    )

    log.info(
        "Loaded warehouse profile %r from %s (%dx%d, %d items)",
        config.name,
        cfg_path,
        config.rows,
        config.cols,
        len(config.items),
    )
    return config
