# src/app/logging_config.py
"""
Central logging configuration for the warehouse tools.

Call configure_logging() from your main entrypoint once, for example:

    from app.logging_config import configure_logging
    configure_logging()

Library modules only create module loggers (logging.getLogger(__name__));
nothing is printed until an entrypoint configures the root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Union


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: logging level as int or name (e.g. logging.DEBUG, "DEBUG")
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    handler = logging.StreamHandler(stream=sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
