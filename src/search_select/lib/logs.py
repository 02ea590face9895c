"""
Logging utilities for the search-select package.

Provides a logger factory that creates configured Python loggers with
consistent formatting across the engine, the record sources and the
Reflex state layer.
"""

import logging
import os
from pathlib import Path

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    File paths (e.g. ``__file__``) are reduced to a dotted name rooted at
    the ``search_select`` package so that records from ``core/control.py``
    show up as ``search_select.core.control``.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        name = _module_name(Path(name))

    log = logging.getLogger(name)

    # Only configure if not already configured
    if not log.handlers:
        log.setLevel(_level())
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)

    return log


def _module_name(path: Path) -> str:
    parts = list(path.with_suffix("").parts)
    if "search_select" in parts:
        parts = parts[parts.index("search_select") :]
        if parts[-1] == "__init__":
            parts = parts[:-1]
        return ".".join(parts)
    return path.stem
