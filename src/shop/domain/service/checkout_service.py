"""Domain service: Checkout.

Turns a cart into a paid, stock-reduced transaction.  This is the only
place that mutates customers and items together, so it owns the
all-or-nothing rule: either the customer is debited and every line's
stock is reduced, or nothing changes at all.

Uses a three-phase approach:
  Phase 1 — validate: re-check every line against *live* item state
            (expiry and stock may have moved since the cart was
            filled), price the cart and check the balance.
  Phase 2 — mutate: debit the customer, then reduce stock per line.
  Phase 3 — report: build the CheckoutResult.

Phases 1 and 2 run under one lock so a service shared between callers
cannot oversell between validation and mutation.
"""

from __future__ import annotations

import logging
import threading

from shop.domain.clock import Clock
from shop.domain.exceptions import (
    DomainException,
    EmptyCartError,
    ExpiredProductError,
    InsufficientFundsError,
    InsufficientStockError,
)
from shop.domain.model.cart import Cart, CartLine
from shop.domain.model.checkout_result import CheckoutResult, ReceiptLine, ShipmentEntry
from shop.domain.model.customer import Customer
from shop.domain.model.item import Item
from shop.domain.model.value_objects import Money
from shop.domain.service import shipping_calculator

logger = logging.getLogger(__name__)


class CheckoutService:

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._lock = threading.Lock()

    def run(self, customer: Customer, cart: Cart) -> CheckoutResult:
        """Check out *cart* for *customer*.

        Raises EmptyCartError, ExpiredProductError, InsufficientStockError
        or InsufficientFundsError without mutating anything.
        """
        with self._lock:
            try:
                lines, units, subtotal, fee, total = self._validate(customer, cart)
            except DomainException as exc:
                logger.warning("Checkout rejected for %s: %s", customer.name, exc)
                raise

            # Phase 2: mutate
            customer.debit(total)
            for line in lines:
                line.item.reduce_stock(line.quantity.value)

        logger.info(
            "Checkout completed for %s: %d line(s), total %s, balance now %s",
            customer.name, len(lines), total, customer.balance,
        )
        return self._build_result(customer, lines, units, subtotal, fee, total)

    # --- Phase 1 --------------------------------------------------------------

    def _validate(
        self, customer: Customer, cart: Cart
    ) -> tuple[tuple[CartLine, ...], list[Item], Money, Money, Money]:
        if cart.is_empty():
            raise EmptyCartError()

        lines = cart.lines()
        today = self._clock.today()
        units: list[Item] = []
        subtotal = Money.zero()

        for line in lines:
            item = line.item
            qty = line.quantity.value

            if item.is_expired(today):
                raise ExpiredProductError(item.name, item.expiry_date)  # type: ignore[arg-type]
            if not item.has_stock(qty):
                raise InsufficientStockError(item.name, qty, item.stock)

            if item.is_shippable:
                units.extend([item] * qty)

            subtotal = subtotal + line.line_total

        fee = shipping_calculator.calculate_fee(units)
        total = subtotal + fee

        if not customer.can_afford(total):
            raise InsufficientFundsError(customer.name, total, customer.balance)

        logger.debug(
            "Checkout validated: subtotal %s, shipping %s, %d shippable unit(s)",
            subtotal, fee, len(units),
        )
        return lines, units, subtotal, fee, total

    # --- Phase 3 --------------------------------------------------------------

    @staticmethod
    def _build_result(
        customer: Customer,
        lines: tuple[CartLine, ...],
        units: list[Item],
        subtotal: Money,
        fee: Money,
        total: Money,
    ) -> CheckoutResult:
        # Group units by item name, keeping first-seen order.
        counts: dict[str, int] = {}
        by_name: dict[str, Item] = {}
        for unit in units:
            counts[unit.name] = counts.get(unit.name, 0) + 1
            by_name.setdefault(unit.name, unit)

        shipment = tuple(
            ShipmentEntry(
                item_name=name,
                units=count,
                unit_weight=by_name[name].weight,
                total_weight=by_name[name].weight * count,
            )
            for name, count in counts.items()
        )

        return CheckoutResult(
            customer_name=customer.name,
            lines=tuple(
                ReceiptLine(
                    item_name=line.item.name,
                    quantity=line.quantity.value,
                    unit_price=line.item.price,
                    line_total=line.line_total,
                )
                for line in lines
            ),
            shipment=shipment,
            total_weight=shipping_calculator.total_weight(units),
            subtotal=subtotal,
            shipping_fee=fee,
            total=total,
            balance=customer.balance,
        )
