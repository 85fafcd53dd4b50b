"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from shop.application.dto import CatalogItemDTO
from shop.domain.clock import Clock
from shop.domain.repository.item_repository import ItemRepository


class ShowCatalogHandler:

    def __init__(self, item_repo: ItemRepository, clock: Clock) -> None:
        self._item_repo = item_repo
        self._clock = clock

    def handle(self) -> list[CatalogItemDTO]:
        today = self._clock.today()
        return [
            CatalogItemDTO(
                name=item.name,
                price=str(item.price),
                stock=item.stock,
                expiry_date=item.expiry_date.isoformat() if item.expiry_date else None,
                weight=str(item.weight) if item.is_shippable else None,
                expired=item.is_expired(today),
            )
            for item in self._item_repo.list_all()
        ]
