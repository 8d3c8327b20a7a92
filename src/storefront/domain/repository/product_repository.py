"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product

ALL_CATEGORIES = "all"


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    def next_id(self) -> int:
        products = self.list_all()
        return max((p.id for p in products), default=0) + 1

    def search(self, category: str | None = None, term: str | None = None) -> list[Product]:
        """Filter the catalog by category and/or a free-text term.

        ``None`` or ``"all"`` as the category means no category filter.
        """
        products = self.list_all()
        if category and category != ALL_CATEGORIES:
            products = [p for p in products if p.category == category]
        if term:
            products = [p for p in products if p.matches(term)]
        return products

    def categories(self) -> list[str]:
        """Distinct non-empty categories, sorted."""
        return sorted({p.category for p in self.list_all() if p.category})
