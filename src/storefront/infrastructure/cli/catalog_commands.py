"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


@click.command("list")
@click.option("--category", default=None, help="Only show this category ('all' for every one).")
@click.option("--search", default=None, help="Match against name or description.")
def catalog_list(category: str | None, search: str | None) -> None:
    """List products, optionally filtered."""
    handler = BrowseCatalogHandler(product_repo=product_repository())
    products = handler.list_products(category=category, search=search)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10}")
    click.echo("-" * 53)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.category:<14} {p.price:>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def catalog_show(product_id: int) -> None:
    """Show one product."""
    handler = BrowseCatalogHandler(product_repo=product_repository())

    try:
        p = handler.get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"#{p.id} {p.name}  {p.price}")
    click.echo(f"Category: {p.category}")
    click.echo(f"In stock: {p.stock}")
    if p.description:
        click.echo(p.description)


@click.command("categories")
def catalog_categories() -> None:
    """List the distinct product categories."""
    handler = BrowseCatalogHandler(product_repo=product_repository())
    for name in handler.categories():
        click.echo(name)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default="", help="Short description.")
@click.option("--category", default="", help="Category tag.")
@click.option("--image", default="", help="Image URL.")
@click.option("--stock", default=0, type=int, help="Units in stock (informational).")
def catalog_add(
    name: str, price: str, description: str, category: str, image: str, stock: int
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            price=price,
            description=description,
            category=category,
            image=image,
            stock=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("seed")
def catalog_seed() -> None:
    """Load the sample catalog into an empty store."""
    handler = AddProductHandler(product_repo=product_repository())
    added = handler.seed()
    if not added:
        click.echo("Catalog already has products; nothing seeded.")
        return
    click.echo(f"Seeded {len(added)} products.")
