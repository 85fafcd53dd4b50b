"""Cart: accumulates purchase intent against live stock.

Adding to a cart reserves nothing: stock is only consumed at checkout,
which re-validates every line against the items' state at that moment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from shop.domain.clock import Clock
from shop.domain.exceptions import ExpiredProductError, InsufficientStockError
from shop.domain.model.item import Item
from shop.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """One (item, quantity) pairing.  The item is a live reference."""

    item: Item
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.item.price * self.quantity.value


class Cart:
    """Ordered collection of lines, at most one per item name."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._lines: dict[str, CartLine] = {}

    def add(self, item: Item, quantity: int) -> None:
        """Add *quantity* units of *item*, merging with an existing line.

        Checks, in order: positive quantity, stock, expiry, and then the
        merged quantity against the item's current stock.  A failed add
        leaves the cart unchanged.
        """
        requested = Quantity(quantity)

        if not item.has_stock(requested.value):
            raise InsufficientStockError(item.name, requested.value, item.stock)

        if item.is_expired(self._clock.today()):
            raise ExpiredProductError(item.name, item.expiry_date)  # type: ignore[arg-type]

        existing = self._lines.get(item.name)
        if existing is None:
            self._lines[item.name] = CartLine(item=item, quantity=requested)
            logger.debug("Added %dx %s to cart", requested.value, item.name)
            return

        merged = existing.quantity + requested
        if not item.has_stock(merged.value):
            raise InsufficientStockError(item.name, merged.value, item.stock)
        self._lines[item.name] = replace(existing, quantity=merged)
        logger.debug("Merged %s in cart, now %d units", item.name, merged.value)

    # --- Queries --------------------------------------------------------------

    def lines(self) -> tuple[CartLine, ...]:
        """Snapshot of the current lines in insertion order."""
        return tuple(self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines

    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self._lines.values():
            result = result + line.line_total
        return result

    def quantity_of(self, item: Item) -> int:
        line = self._lines.get(item.name)
        return line.quantity.value if line else 0

    def __len__(self) -> int:
        return len(self._lines)
