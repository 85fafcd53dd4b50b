"""Tests for loading the catalog from a JSON fixture."""

import json
from datetime import date, timedelta
from pathlib import Path

import pytest

from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.item import Capability
from shop.domain.model.value_objects import Money, Weight
from shop.infrastructure.bootstrap import DEFAULT_CATALOG
from shop.infrastructure.persistence.json_item_repository import JsonItemRepository
from tests.fakes import TODAY, FixedClock


def _write(tmp_path, records) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


class TestJsonItemRepositoryLoad:

    def test_loads_items_and_capabilities(self, tmp_path):
        path = _write(tmp_path, [
            {"name": "Cheese 400g", "price": "100", "stock": 5, "expires_in_days": 5, "weight": "0.2"},
            {"name": "Milk", "price": 2.5, "stock": 1, "expiry_date": "2026-03-12"},
            {"name": "Scratch Card", "price": "50", "stock": 10},
        ])

        repo = JsonItemRepository(path, FixedClock())

        cheese = repo.get_by_name("cheese 400g")
        assert cheese.price == Money.of("100")
        assert cheese.stock == 5
        assert cheese.expiry_date == TODAY + timedelta(days=5)
        assert cheese.weight == Weight.of("0.2")
        assert repo.get_by_name("Milk").expiry_date == date(2026, 3, 12)
        assert repo.get_by_name("Scratch Card").capabilities == frozenset()
        assert [i.name for i in repo.list_all()] == ["Cheese 400g", "Milk", "Scratch Card"]

    def test_unknown_name_returns_none(self, tmp_path):
        repo = JsonItemRepository(_write(tmp_path, []), FixedClock())
        assert repo.get_by_name("TV") is None

    def test_save_keeps_changes_in_memory_only(self, tmp_path):
        path = _write(tmp_path, [{"name": "TV", "price": "5000", "stock": 3, "weight": 8}])
        repo = JsonItemRepository(path, FixedClock())

        tv = repo.get_by_name("TV")
        tv.reduce_stock(1)
        repo.save(tv)

        assert repo.get_by_name("TV").stock == 2
        assert json.loads(path.read_text(encoding="utf-8"))[0]["stock"] == 3

    def test_default_catalog_has_sample_items(self):
        repo = JsonItemRepository(DEFAULT_CATALOG, FixedClock())
        assert {i.name for i in repo.list_all()} == {
            "Cheese 400g", "Biscuits 700g", "TV", "Scratch Card",
        }
        assert repo.get_by_name("TV").has_capability(Capability.SHIPPABLE)
        assert not repo.get_by_name("TV").has_capability(Capability.PERISHABLE)


class TestJsonItemRepositoryErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(EntityNotFoundError, match="Catalog file not found"):
            JsonItemRepository(tmp_path / "nope.json", FixedClock())

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError, match="not valid JSON"):
            JsonItemRepository(path, FixedClock())

    def test_not_a_list(self, tmp_path):
        with pytest.raises(ValidationError, match="must contain a JSON list"):
            JsonItemRepository(_write(tmp_path, {"name": "TV"}), FixedClock())

    def test_missing_field(self, tmp_path):
        with pytest.raises(ValidationError, match="missing field 'stock'"):
            JsonItemRepository(_write(tmp_path, [{"name": "TV", "price": "1"}]), FixedClock())

    def test_bad_expiry_date(self, tmp_path):
        path = _write(tmp_path, [{"name": "Milk", "price": "1", "stock": 1, "expiry_date": "soon"}])
        with pytest.raises(ValidationError, match="Invalid expiry_date"):
            JsonItemRepository(path, FixedClock())

    def test_duplicate_names(self, tmp_path):
        path = _write(tmp_path, [
            {"name": "TV", "price": "1", "stock": 1},
            {"name": "tv", "price": "2", "stock": 1},
        ])
        with pytest.raises(ValidationError, match="Duplicate item"):
            JsonItemRepository(path, FixedClock())

    def test_negative_stock(self, tmp_path):
        path = _write(tmp_path, [{"name": "TV", "price": "1", "stock": -1}])
        with pytest.raises(ValidationError, match="cannot be negative"):
            JsonItemRepository(path, FixedClock())

    def test_bad_expires_in_days(self, tmp_path):
        path = _write(tmp_path, [{"name": "Milk", "price": "1", "stock": 1, "expires_in_days": "soon"}])
        with pytest.raises(ValidationError, match="Invalid expires_in_days 'soon' for 'Milk'"):
            JsonItemRepository(path, FixedClock())

    def test_non_string_name(self, tmp_path):
        path = _write(tmp_path, [{"name": 42, "price": "1", "stock": 1}])
        with pytest.raises(ValidationError, match="non-string name"):
            JsonItemRepository(path, FixedClock())

    def test_record_not_an_object(self, tmp_path):
        with pytest.raises(ValidationError, match="must be a JSON object"):
            JsonItemRepository(_write(tmp_path, ["TV"]), FixedClock())

    def test_bad_weight(self, tmp_path):
        path = _write(tmp_path, [{"name": "TV", "price": "1", "stock": 1, "weight": "heavy"}])
        with pytest.raises(ValidationError, match="Invalid weight"):
            JsonItemRepository(path, FixedClock())
