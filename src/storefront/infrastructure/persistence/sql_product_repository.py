"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.orm import sessionmaker

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import (
    ALL_CATEGORIES,
    ProductRepository,
)
from storefront.infrastructure.persistence.sql_models import ProductRow


class SqlProductRepository(ProductRepository):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._session_factory() as session:
            row = session.get(ProductRow, product_id)
            return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        return self._query(select(ProductRow))

    def save(self, product: Product) -> None:
        with self._session_factory() as session:
            session.merge(self._to_row(product))
            session.commit()

    def search(self, category: str | None = None, term: str | None = None) -> list[Product]:
        stmt = select(ProductRow)
        if category and category != ALL_CATEGORIES:
            stmt = stmt.where(ProductRow.category == category)
        if term:
            pattern = f"%{term}%"
            stmt = stmt.where(
                or_(ProductRow.name.ilike(pattern), ProductRow.description.ilike(pattern))
            )
        return self._query(stmt)

    def categories(self) -> list[str]:
        stmt = (
            select(ProductRow.category)
            .where(ProductRow.category != "")
            .distinct()
            .order_by(ProductRow.category)
        )
        with self._session_factory() as session:
            return list(session.scalars(stmt))

    # --- Mapping --------------------------------------------------------------

    def _query(self, stmt) -> list[Product]:
        with self._session_factory() as session:
            rows = session.scalars(stmt.order_by(ProductRow.id)).all()
            return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_row(product: Product) -> ProductRow:
        return ProductRow(
            id=product.id,
            name=product.name,
            description=product.description,
            price_cents=product.price.to_cents(),
            category=product.category,
            image=product.image,
            stock=product.stock,
        )

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money.from_cents(row.price_cents),
            description=row.description,
            category=row.category,
            image=row.image,
            stock=row.stock,
        )
