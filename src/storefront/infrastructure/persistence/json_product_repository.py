"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_files import write_json_atomically


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return sorted(self._load().values(), key=lambda p: p.id)

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"])),
                description=item.get("description", ""),
                category=item.get("category", ""),
                image=item.get("image", ""),
                stock=item.get("stock", 0),
            )
            for item in raw
        }

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "category": p.category,
                "image": p.image,
                "stock": p.stock,
            }
            for p in products.values()
        ]
        write_json_atomically(self._file_path, raw)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
