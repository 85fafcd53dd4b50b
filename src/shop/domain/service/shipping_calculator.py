"""Domain service: shipping fee calculation.

Pure functions over a list of shippable units.  One unit is one
physical piece, so an item bought three times appears three times.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from shop.domain.model.item import Item
from shop.domain.model.value_objects import Money, Weight

RATE_PER_KG = Decimal("10.0")


def total_weight(units: Sequence[Item]) -> Weight:
    result = Weight.zero()
    for unit in units:
        result = result + unit.weight
    return result


def calculate_fee(units: Sequence[Item]) -> Money:
    """Fee for shipping *units*: total kilograms times RATE_PER_KG.

    Raises ValidationError if any unit is not shippable.
    """
    if not units:
        return Money.zero()
    return Money(total_weight(units).kilograms * RATE_PER_KG)
