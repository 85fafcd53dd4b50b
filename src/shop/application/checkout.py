"""Application service: Checkout use case.

Orchestrates the flow between the catalog repository and the domain
model: resolves item names, fills a cart, runs the checkout service
and saves the items whose stock changed.
"""

from __future__ import annotations

import logging

from shop.application.dto import (
    CartItemSpec,
    CheckoutDTO,
    ReceiptLineDTO,
    ShipmentLineDTO,
)
from shop.domain.clock import Clock
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.checkout_result import CheckoutResult
from shop.domain.model.customer import Customer
from shop.domain.model.value_objects import Money
from shop.domain.repository.item_repository import ItemRepository
from shop.domain.service.checkout_service import CheckoutService

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, item_repo: ItemRepository, clock: Clock) -> None:
        self._item_repo = item_repo
        self._clock = clock
        self._service = CheckoutService(clock)

    def handle(
        self,
        customer_name: str,
        balance: str,
        item_specs: list[CartItemSpec],
    ) -> CheckoutDTO:
        """Check out the requested items for a customer.

        Steps:
        1. Build the customer account from the opening balance.
        2. Resolve each item name (fail if not found) and add it to a
           fresh cart; the cart enforces quantity, stock and expiry.
        3. Run the checkout service (all-or-nothing).
        4. Persist the stock-reduced items and return a DTO.
        """
        customer = Customer.create(customer_name, Money.of(balance))
        cart = Cart(self._clock)

        for spec in item_specs:
            item = self._item_repo.get_by_name(spec.item_name)
            if item is None:
                raise EntityNotFoundError(f"Item not found: '{spec.item_name}'")
            cart.add(item, spec.quantity)

        logger.debug("Cart for %s holds %d line(s)", customer.name, len(cart))
        result = self._service.run(customer, cart)

        for line in cart.lines():
            self._item_repo.save(line.item)
        logger.info("Saved stock for %d item(s)", len(cart))

        return self.to_dto(result)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def to_dto(result: CheckoutResult) -> CheckoutDTO:
        return CheckoutDTO(
            customer_name=result.customer_name,
            items=[
                ReceiptLineDTO(
                    item_name=line.item_name,
                    quantity=line.quantity,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in result.lines
            ],
            shipment=[
                ShipmentLineDTO(
                    item_name=entry.item_name,
                    units=entry.units,
                    weight=str(entry.total_weight),
                )
                for entry in result.shipment
            ],
            total_weight=str(result.total_weight),
            subtotal=str(result.subtotal),
            shipping_fee=str(result.shipping_fee),
            total=str(result.total),
            balance=str(result.balance),
        )
