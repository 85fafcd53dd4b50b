"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about the concrete
clock and repository classes.  Every other module depends only on
abstractions.
"""

from __future__ import annotations

from pathlib import Path

from shop.domain.clock import Clock
from shop.infrastructure.clock import SystemClock
from shop.infrastructure.persistence.json_item_repository import JsonItemRepository

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_CATALOG = _DATA_DIR / "catalog.json"


def clock() -> Clock:
    return SystemClock()


def item_repository(catalog_path: Path | None, clk: Clock) -> JsonItemRepository:
    return JsonItemRepository(catalog_path or DEFAULT_CATALOG, clk)
