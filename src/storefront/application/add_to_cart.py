"""Application service: Add To Cart use case.

The only cart mutation that needs the catalog: the product is looked up
so the new line can snapshot its name, price and image.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, cart: Cart, product_id: int) -> CartLine:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        cart.add(product)
        return cart.get(product.id)  # type: ignore[return-value]
