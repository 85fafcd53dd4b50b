"""Item aggregate — a sellable, stock-backed catalog entry.

Capabilities (perishable, shippable) are attached as optional records
rather than expressed through subclasses, so an item may carry none,
one or both without a class per combination.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from shop.domain.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ValidationError,
)
from shop.domain.model.value_objects import Money, Weight


class Capability(Enum):
    PERISHABLE = "PERISHABLE"
    SHIPPABLE = "SHIPPABLE"


@dataclass(frozen=True)
class PerishableInfo:
    expiry_date: date

    def is_expired(self, today: date) -> bool:
        # Selling on the expiry date itself is still allowed.
        return today > self.expiry_date


@dataclass(frozen=True)
class ShippableInfo:
    weight: Weight  # per unit

    def __post_init__(self) -> None:
        if self.weight.kilograms <= 0:
            raise ValidationError("Shippable weight must be greater than zero")


@dataclass(eq=False)
class Item:
    """A product in the catalog together with its stock level.

    Identity is the name; two Item objects are never merged by value.
    Stock is only ever reduced by checkout, through ``reduce_stock``.

    Invariants:
    - ``stock`` is never negative
    - ``price`` is never negative (enforced by Money)
    """

    name: str
    price: Money
    stock: int
    perishable: PerishableInfo | None = None
    shippable: ShippableInfo | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        stock: int,
        expiry_date: date | None = None,
        weight: Weight | None = None,
    ) -> Item:
        """Create a new catalog item, enforcing all invariants."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Item name is required")
        if not isinstance(stock, int) or isinstance(stock, bool):
            raise ValidationError(
                f"Stock for {name} must be an integer, got {type(stock).__name__}"
            )
        if stock < 0:
            raise ValidationError(f"Stock for {name} cannot be negative, got {stock}")

        return Item(
            name=name.strip(),
            price=price,
            stock=stock,
            perishable=PerishableInfo(expiry_date) if expiry_date is not None else None,
            shippable=ShippableInfo(weight) if weight is not None else None,
        )

    # --- Capabilities ---------------------------------------------------------

    def has_capability(self, capability: Capability) -> bool:
        if capability is Capability.PERISHABLE:
            return self.perishable is not None
        if capability is Capability.SHIPPABLE:
            return self.shippable is not None
        return False

    @property
    def capabilities(self) -> frozenset[Capability]:
        return frozenset(c for c in Capability if self.has_capability(c))

    @property
    def is_perishable(self) -> bool:
        return self.perishable is not None

    @property
    def is_shippable(self) -> bool:
        return self.shippable is not None

    @property
    def expiry_date(self) -> date | None:
        return self.perishable.expiry_date if self.perishable else None

    @property
    def weight(self) -> Weight:
        """Per-unit shipping weight.  Only defined for shippable items."""
        if self.shippable is None:
            raise ValidationError(f"Item {self.name} is not shippable")
        return self.shippable.weight

    def is_expired(self, today: date) -> bool:
        """True if the item is perishable and *today* is past its expiry date."""
        return self.perishable is not None and self.perishable.is_expired(today)

    # --- Stock ----------------------------------------------------------------

    def has_stock(self, quantity: int) -> bool:
        return quantity <= self.stock

    def reduce_stock(self, amount: int) -> None:
        """Permanently remove *amount* units from stock.

        Callers validate availability first, so reaching either error
        here means an upstream check was skipped.
        """
        if amount <= 0:
            raise InvalidQuantityError(f"Stock reduction must be positive, got {amount}")
        if amount > self.stock:
            raise InsufficientStockError(self.name, amount, self.stock)
        self.stock -= amount

    def __repr__(self) -> str:
        return f"Item(name={self.name!r}, price={self.price}, stock={self.stock})"
