"""CLI commands for placing and showing orders."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import OrderDTO
from storefront.application.show_order import ShowOrderHandler
from storefront.application.submit_order import SubmitOrderHandler
from storefront.domain.exceptions import CheckoutValidationError, DomainException
from storefront.domain.service.order_validator import CheckoutForm
from storefront.infrastructure.bootstrap import unit_of_work
from storefront.infrastructure.cli.cart_commands import open_cart


@click.command("checkout")
@click.option("--name", "customer_name", default="", help="Full name.")
@click.option("--email", default="", help="Email address.")
@click.option("--address", default="", help="Shipping address.")
def order_checkout(customer_name: str, email: str, address: str) -> None:
    """Place an order for everything in the cart."""
    cart = open_cart()
    submit = SubmitOrderHandler(uow_factory=unit_of_work)
    handler = CheckoutHandler(cart=cart, submit=submit.handle)

    form = CheckoutForm(customer_name=customer_name, email=email, address=address)
    try:
        confirmation = handler.handle(form)
    except CheckoutValidationError as exc:
        for field, error in exc.errors.items():
            click.echo(f"  {field}: {error.message}", err=True)
        raise click.ClickException("Please correct the fields above.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{confirmation.message}  Order #{confirmation.order_id}, total {confirmation.total}")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.customer_name} <{dto.email}>")
    click.echo(f"Ship to:  {dto.address}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*38}")
    for line in dto.lines:
        click.echo(
            f"  {'#' + str(line.product_id):<10} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Order Total':<18} {dto.total:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(uow_factory=unit_of_work)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
