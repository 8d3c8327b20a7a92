"""Application service: Browse Catalog use case (query).

Category filter plus free-text search over name and description, the
distinct category list, and single-product lookup.
"""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def list_products(
        self, category: str | None = None, search: str | None = None
    ) -> list[ProductDTO]:
        products = self._product_repo.search(category=category, term=search)
        return [self._to_dto(p) for p in products]

    def get_product(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return self._to_dto(product)

    def categories(self) -> list[str]:
        return self._product_repo.categories()

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=str(product.price),
            category=product.category,
            image=product.image,
            stock=product.stock,
        )
