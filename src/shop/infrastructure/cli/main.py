import logging
from pathlib import Path

import click

from shop.infrastructure.cli.catalog_commands import catalog_list
from shop.infrastructure.cli.checkout_commands import checkout, demo


@click.group()
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="SHOP_CATALOG",
    default=None,
    help="Catalog JSON file (defaults to data/catalog.json).",
)
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, catalog_path: Path | None, verbose: int) -> None:
    """Shop — catalog, cart and checkout"""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    ctx.ensure_object(dict)
    ctx.obj["catalog_path"] = catalog_path


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


# Register subcommands
catalog.add_command(catalog_list)
cli.add_command(checkout)
cli.add_command(demo)
