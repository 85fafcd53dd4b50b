"""CLI commands for checkout."""

from __future__ import annotations

import click

from shop.application.checkout import CheckoutHandler
from shop.application.dto import CartItemSpec
from shop.application.receipt import render_checkout
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import clock, item_repository

DEMO_CUSTOMER = "Mahmoud"
DEMO_BALANCE = "10000"
DEMO_ITEMS = "Cheese 400g:2,Biscuits 700g:1,TV:1,Scratch Card:1"


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'TV:1,Cheese 400g:2' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{name}'."
            )
        specs.append(CartItemSpec(item_name=name.strip(), quantity=qty))
    return specs


def _run_checkout(obj: dict, customer: str, balance: str, items: str) -> None:
    specs = _parse_items(items)
    clk = clock()

    try:
        handler = CheckoutHandler(
            item_repo=item_repository(obj.get("catalog_path"), clk),
            clock=clk,
        )
        dto = handler.handle(customer_name=customer, balance=balance, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for line in render_checkout(dto):
        click.echo(line)


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Opening balance (e.g. 10000).")
@click.option("--items", required=True, help="Items as 'Name:Qty,Name:Qty'.")
@click.pass_obj
def checkout(obj: dict, customer: str, balance: str, items: str) -> None:
    """Fill a cart and check it out, printing the receipt."""
    _run_checkout(obj, customer, balance, items)


@click.command("demo")
@click.pass_obj
def demo(obj: dict) -> None:
    """Run the sample checkout against the catalog."""
    _run_checkout(obj, DEMO_CUSTOMER, DEMO_BALANCE, DEMO_ITEMS)
