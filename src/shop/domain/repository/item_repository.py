"""Abstract repository for the Item aggregate (the catalog).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Item | None:
        """Return an item by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item in the catalog."""

    @abstractmethod
    def save(self, item: Item) -> None:
        """Persist a new or updated item."""
