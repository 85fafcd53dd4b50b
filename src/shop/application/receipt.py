"""Plain-text rendering of a completed checkout.

Produces the shipment notice (only when something ships) followed by
the checkout receipt.  Returns lines so any front end can print them.
"""

from __future__ import annotations

from shop.application.dto import CheckoutDTO

SEPARATOR = "-" * 38


def render_shipment_notice(dto: CheckoutDTO) -> list[str]:
    if not dto.has_shipment:
        return []
    lines = ["** Shipment notice **"]
    for entry in dto.shipment:
        lines.append(f"{entry.units}x {entry.item_name:<24} {entry.weight:>8}")
    lines.append(f"Total package weight {dto.total_weight}")
    return lines


def render_receipt(dto: CheckoutDTO) -> list[str]:
    lines = ["** Checkout receipt **"]
    for item in dto.items:
        lines.append(f"{item.quantity}x {item.item_name:<24} {item.line_total:>10}")
    lines.append(SEPARATOR)
    lines.append(f"{'Subtotal':<27} {dto.subtotal:>10}")
    lines.append(f"{'Shipping':<27} {dto.shipping_fee:>10}")
    lines.append(f"{'Amount':<27} {dto.total:>10}")
    lines.append(f"{'Balance':<27} {dto.balance:>10}")
    return lines


def render_checkout(dto: CheckoutDTO) -> list[str]:
    notice = render_shipment_notice(dto)
    if notice:
        notice.append("")
    return notice + render_receipt(dto)
