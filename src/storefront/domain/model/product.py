"""Product — a read-only catalog entry.

The storefront core never changes a product.  Carts and orders copy the
attributes they need at the moment they use them, so later catalog edits
cannot alter an existing cart line or a placed order.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``stock`` is informational only; nothing in the order flow reads or
    decrements it.
    """

    id: int
    name: str
    price: Money
    description: str = ""
    category: str = ""
    image: str = ""
    stock: int = 0

    @staticmethod
    def create(
        id: int,
        name: str,
        price: Money,
        description: str = "",
        category: str = "",
        image: str = "",
        stock: int = 0,
    ) -> Product:
        """Build a new catalog entry, enforcing catalog rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not price.is_whole_cents:
            raise ValidationError(f"Product price must be whole cents, got {price.amount}")
        if stock < 0:
            raise ValidationError("Product stock cannot be negative")
        return Product(
            id=id,
            name=name.strip(),
            price=price,
            description=description.strip(),
            category=category.strip(),
            image=image.strip(),
            stock=stock,
        )

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = term.lower()
        return needle in self.name.lower() or needle in self.description.lower()
