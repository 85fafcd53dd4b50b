"""JSON-fixture-backed implementation of ItemRepository.

The fixture is read once at construction.  Stock changes made by
checkout live in memory for the rest of the process and are never
written back to the file.

Record format::

    {"name": "Cheese 400g", "price": "100", "stock": 5,
     "expires_in_days": 5, "weight": "0.2"}

``expiry_date`` (ISO date) may be given instead of ``expires_in_days``
(relative to the clock's today).  ``weight`` is per unit, in kilograms.
"""

from __future__ import annotations

import json
import logging
from datetime import date, timedelta
from pathlib import Path

from shop.domain.clock import Clock
from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.item import Item
from shop.domain.model.value_objects import Money, Weight
from shop.domain.repository.item_repository import ItemRepository

logger = logging.getLogger(__name__)


class JsonItemRepository(ItemRepository):

    def __init__(self, file_path: Path, clock: Clock) -> None:
        self._file_path = file_path
        self._clock = clock
        self._items: dict[str, Item] = {}
        for item in self._load():
            if item.name.lower() in self._items:
                raise ValidationError(f"Duplicate item '{item.name}' in {file_path}")
            self._items[item.name.lower()] = item
        logger.info("Loaded %d catalog item(s) from %s", len(self._items), file_path)

    # --- ItemRepository interface ---------------------------------------------

    def get_by_name(self, name: str) -> Item | None:
        return self._items.get(name.strip().lower())

    def list_all(self) -> list[Item]:
        return list(self._items.values())

    def save(self, item: Item) -> None:
        self._items[item.name.lower()] = item

    # --- Serialization --------------------------------------------------------

    def _to_domain(self, raw: dict) -> Item:
        if not isinstance(raw, dict):
            raise ValidationError(f"Catalog record {raw!r} must be a JSON object")
        try:
            name = raw["name"]
            price = Money.of(raw["price"])
            stock = raw["stock"]
        except KeyError as exc:
            raise ValidationError(
                f"Catalog record {raw!r} is missing field {exc.args[0]!r}"
            ) from exc
        if not isinstance(name, str):
            raise ValidationError(f"Catalog record {raw!r} has a non-string name")

        expiry_date: date | None = None
        if raw.get("expiry_date") is not None:
            try:
                expiry_date = date.fromisoformat(raw["expiry_date"])
            except (TypeError, ValueError) as exc:
                raise ValidationError(
                    f"Invalid expiry_date {raw['expiry_date']!r} for '{name}'"
                ) from exc
        elif raw.get("expires_in_days") is not None:
            try:
                days = timedelta(days=int(raw["expires_in_days"]))
                expiry_date = self._clock.today() + days
            except (TypeError, ValueError, OverflowError) as exc:
                raise ValidationError(
                    f"Invalid expires_in_days {raw['expires_in_days']!r} for '{name}'"
                ) from exc

        weight = Weight.of(raw["weight"]) if raw.get("weight") is not None else None

        return Item.create(
            name=name,
            price=price,
            stock=stock,
            expiry_date=expiry_date,
            weight=weight,
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> list[Item]:
        if not self._file_path.exists():
            raise EntityNotFoundError(f"Catalog file not found: {self._file_path}")
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog file {self._file_path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, list):
            raise ValidationError(f"Catalog file {self._file_path} must contain a JSON list")
        return [self._to_domain(record) for record in raw]
