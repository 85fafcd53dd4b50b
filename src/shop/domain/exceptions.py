"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each kind carries the context the caller needs to act on it (item name,
requested vs. available amounts).
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shop.domain.model.value_objects import Money


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidQuantityError(ValidationError):
    """A quantity was zero, negative or not an integer."""


class InsufficientStockError(DomainException):
    """More units were requested than an item currently has in stock."""

    def __init__(self, item_name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {item_name} "
            f"(requested {requested}, have {available} available)"
        )
        self.item_name = item_name
        self.requested = requested
        self.available = available


class ExpiredProductError(DomainException):
    """A perishable item is past its expiry date."""

    def __init__(self, item_name: str, expiry_date: date) -> None:
        super().__init__(
            f"Product {item_name} is expired (expired on {expiry_date.isoformat()})"
        )
        self.item_name = item_name
        self.expiry_date = expiry_date


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no lines."""

    def __init__(self) -> None:
        super().__init__("Cart is empty. Cannot proceed to checkout.")


class InsufficientFundsError(DomainException):
    """An amount exceeds the customer's balance."""

    def __init__(self, customer_name: str, required: Money, available: Money) -> None:
        super().__init__(
            f"Insufficient balance for {customer_name} "
            f"(required {required}, have {available})"
        )
        self.customer_name = customer_name
        self.required = required
        self.available = available
