"""Outcome of a successful checkout.

Returned by value to the caller; the checkout service keeps no
reference to it.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class ReceiptLine:
    item_name: str
    quantity: int
    unit_price: Money
    line_total: Money


@dataclass(frozen=True)
class ShipmentEntry:
    """Shipped units of one item, grouped by item name."""

    item_name: str
    units: int
    unit_weight: Weight
    total_weight: Weight


@dataclass(frozen=True)
class CheckoutResult:
    customer_name: str
    lines: tuple[ReceiptLine, ...]
    shipment: tuple[ShipmentEntry, ...]
    total_weight: Weight
    subtotal: Money
    shipping_fee: Money
    total: Money
    balance: Money  # after the debit

    @property
    def requires_shipping(self) -> bool:
        return bool(self.shipment)
