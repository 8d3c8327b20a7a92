"""Application service: Add Product use case (catalog administration)."""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

# Starter catalog loaded by ``seed()`` into an empty store.
SAMPLE_PRODUCTS = [
    ("Laptop Pro", "High-performance laptop with 16GB RAM", "999.99", "Electronics",
     "https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=400", 15),
    ("Wireless Mouse", "Ergonomic wireless mouse with USB receiver", "29.99", "Electronics",
     "https://images.unsplash.com/photo-1527864550417-7fd91fc51a46?w=400", 50),
    ("Coffee Maker", "Programmable coffee maker with timer", "79.99", "Home",
     "https://images.unsplash.com/photo-1517668808822-9ebb02f2a0e6?w=400", 30),
    ("Running Shoes", "Comfortable running shoes for all terrains", "89.99", "Sports",
     "https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=400", 25),
    ("Backpack", "Durable backpack with laptop compartment", "49.99", "Accessories",
     "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=400", 40),
    ("Headphones", "Noise-canceling wireless headphones", "149.99", "Electronics",
     "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=400", 20),
]


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        description: str = "",
        category: str = "",
        image: str = "",
        stock: int = 0,
    ) -> Product:
        """Add a new product to the catalog."""
        if any(p.name.lower() == name.strip().lower() for p in self._product_repo.list_all()):
            raise ValidationError(f"Product '{name}' already exists")

        product = Product.create(
            id=self._product_repo.next_id(),
            name=name,
            price=Money.of(price),
            description=description,
            category=category,
            image=image,
            stock=stock,
        )
        self._product_repo.save(product)
        return product

    def seed(self) -> list[Product]:
        """Load the sample catalog, but only into an empty store."""
        if self._product_repo.list_all():
            return []
        return [
            self.handle(name, price, description, category, image, stock)
            for name, description, price, category, image, stock in SAMPLE_PRODUCTS
        ]
