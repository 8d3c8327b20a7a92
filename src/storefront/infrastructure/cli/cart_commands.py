"""CLI commands for the shopping cart.

Each command loads the cart session, subscribes a listener that saves
the cart and prints the running summary after every change, then applies
one cart operation.
"""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart
from storefront.infrastructure.bootstrap import cart_store, product_repository
from storefront.infrastructure.persistence.json_cart_store import CorruptCartSession


def cart_summary(cart: Cart) -> str:
    return f"Cart ({cart.item_count}) - {cart.total()}"


def load_cart() -> Cart:
    try:
        return cart_store().load()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def open_cart() -> Cart:
    """Load the session cart with persistence wired in as an observer."""
    return _watch(load_cart())


def _watch(cart: Cart) -> Cart:
    store = cart_store()

    def on_change(changed: Cart) -> None:
        store.save(changed)
        click.echo(cart_summary(changed))

    cart.subscribe(on_change)
    return cart


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_add(product_id: int) -> None:
    """Add one unit of a product to the cart."""
    cart = open_cart()
    handler = AddToCartHandler(product_repo=product_repository())

    try:
        line = handler.handle(cart, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"'{line.name}' x{line.quantity} in cart")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_remove(product_id: int) -> None:
    """Remove a product from the cart."""
    cart = open_cart()
    if product_id not in cart:
        click.echo(f"Product #{product_id} is not in the cart.")
        return
    cart.remove(product_id)


@click.command("set")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_set(product_id: int, quantity: int) -> None:
    """Change the quantity of a product already in the cart."""
    cart = open_cart()
    if product_id not in cart:
        click.echo(f"Product #{product_id} is not in the cart.")
        return
    cart.set_quantity(product_id, quantity)


@click.command("show")
def cart_show() -> None:
    """Show the cart contents and total."""
    cart = load_cart()

    if cart.is_empty:
        click.echo("Your cart is empty")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for line in cart.lines:
        click.echo(
            f"  {line.product_id:<6} {line.name:<20} {line.quantity:>5} "
            f"{str(line.unit_price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Total':<34} {str(cart.total()):>20}")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    try:
        cart = _watch(cart_store().load())
    except CorruptCartSession:
        cart_store().save(Cart())
        click.echo("Discarded an unreadable cart. Your cart is empty")
        return
    if cart.is_empty:
        click.echo("Your cart is empty")
        return
    cart.clear()
