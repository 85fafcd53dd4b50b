"""Customer account: a name and a spendable balance."""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import InsufficientFundsError, ValidationError
from shop.domain.model.value_objects import Money


@dataclass
class Customer:
    """Holds the balance debited by checkout.

    The balance is a Money, so it can never go negative; ``debit``
    refuses up front rather than relying on that.
    """

    name: str
    balance: Money

    @staticmethod
    def create(name: str, balance: Money) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        return Customer(name=name.strip(), balance=balance)

    def can_afford(self, amount: Money) -> bool:
        return amount <= self.balance

    def debit(self, amount: Money) -> None:
        """Reduce the balance by *amount*, or fail without touching it."""
        if not self.can_afford(amount):
            raise InsufficientFundsError(self.name, amount, self.balance)
        self.balance = self.balance - amount
