"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (item name + quantity)."""

    item_name: str
    quantity: int


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single purchased line as displayed to the user."""

    item_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class ShipmentLineDTO:
    item_name: str
    units: int
    weight: str  # total for the line, e.g. "0.4kg"


@dataclass(frozen=True)
class CheckoutDTO:
    """Output: a completed checkout as displayed to the user."""

    customer_name: str
    items: list[ReceiptLineDTO]
    shipment: list[ShipmentLineDTO]
    total_weight: str
    subtotal: str
    shipping_fee: str
    total: str
    balance: str

    @property
    def has_shipment(self) -> bool:
        return bool(self.shipment)


@dataclass(frozen=True)
class CatalogItemDTO:
    name: str
    price: str
    stock: int
    expiry_date: str | None
    weight: str | None
    expired: bool
