"""CLI commands for the catalog."""

from __future__ import annotations

import click

from shop.application.show_catalog import ShowCatalogHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import clock, item_repository


@click.command("list")
@click.pass_obj
def catalog_list(obj: dict) -> None:
    """List all items with stock, expiry and weight."""
    clk = clock()
    try:
        handler = ShowCatalogHandler(
            item_repo=item_repository(obj.get("catalog_path"), clk),
            clock=clk,
        )
        lines = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No items found.")
        return

    click.echo(f"{'Name':<20} {'Price':>10} {'Stock':>6} {'Expires':>12} {'Weight':>8}")
    click.echo("-" * 60)
    for line in lines:
        expires = line.expiry_date or "-"
        if line.expired:
            expires = f"{expires}*"
        click.echo(
            f"{line.name:<20} {line.price:>10} {line.stock:>6} "
            f"{expires:>12} {line.weight or '-':>8}"
        )
    if any(line.expired for line in lines):
        click.echo("* expired")
