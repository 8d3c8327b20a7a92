import logging

import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.catalog_commands import (
    catalog_add,
    catalog_categories,
    catalog_list,
    catalog_seed,
    catalog_show,
)
from storefront.infrastructure.cli.order_commands import order_checkout, order_show


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Storefront — catalog, cart and checkout"""
    try:
        cfg = settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))

    level = logging.DEBUG if verbose else cfg.log_level
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@cli.group()
def catalog() -> None:
    """Browse and manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage your shopping cart."""


@cli.group()
def order() -> None:
    """Place and look up orders."""


# Register subcommands
catalog.add_command(catalog_add)
catalog.add_command(catalog_categories)
catalog.add_command(catalog_list)
catalog.add_command(catalog_seed)
catalog.add_command(catalog_show)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
order.add_command(order_checkout)
order.add_command(order_show)
