"""Tests for plain-text receipt rendering."""

from shop.application.dto import CheckoutDTO, ReceiptLineDTO, ShipmentLineDTO
from shop.application.receipt import render_checkout, render_receipt, render_shipment_notice


def _dto(shipment=None) -> CheckoutDTO:
    return CheckoutDTO(
        customer_name="Mahmoud",
        items=[
            ReceiptLineDTO("Cheese 400g", 2, "$100.00", "$200.00"),
            ReceiptLineDTO("Scratch Card", 1, "$50.00", "$50.00"),
        ],
        shipment=shipment if shipment is not None else [ShipmentLineDTO("Cheese 400g", 2, "0.4kg")],
        total_weight="0.4kg",
        subtotal="$250.00",
        shipping_fee="$4.00",
        total="$254.00",
        balance="$746.00",
    )


def test_shipment_notice():
    lines = render_shipment_notice(_dto())
    assert lines[0] == "** Shipment notice **"
    assert lines[1].startswith("2x Cheese 400g")
    assert lines[1].endswith("0.4kg")
    assert lines[-1] == "Total package weight 0.4kg"


def test_no_shipment_notice_without_shippable_items():
    dto = _dto(shipment=[])
    assert render_shipment_notice(dto) == []
    assert render_checkout(dto)[0] == "** Checkout receipt **"


def test_receipt():
    lines = render_receipt(_dto())
    assert lines[0] == "** Checkout receipt **"
    assert lines[1].startswith("2x Cheese 400g") and lines[1].endswith("$200.00")
    assert lines[2].startswith("1x Scratch Card") and lines[2].endswith("$50.00")
    assert set(lines[3]) == {"-"}
    assert lines[4].split() == ["Subtotal", "$250.00"]
    assert lines[5].split() == ["Shipping", "$4.00"]
    assert lines[6].split() == ["Amount", "$254.00"]
    assert lines[7].split() == ["Balance", "$746.00"]


def test_checkout_puts_notice_before_receipt():
    lines = render_checkout(_dto())
    assert lines.index("** Shipment notice **") < lines.index("** Checkout receipt **")
    assert "" in lines
