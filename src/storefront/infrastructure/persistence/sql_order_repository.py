"""SQLAlchemy-backed implementation of OrderRepository.

Bound to the session of the current unit of work.  ``add_header`` and
``add_line`` flush so the generated ids are known, but nothing becomes
visible to other sessions until the unit of work commits.
"""

from __future__ import annotations

import logging
from datetime import timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.sql_models import OrderItemRow, OrderRow

logger = logging.getLogger(__name__)


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def add_header(self, order: Order) -> int:
        row = OrderRow(
            customer_name=order.customer_name,
            email=order.email,
            address=order.address,
            total_cents=order.total.to_cents(),
            created_at=order.created_at,
        )
        self._session.add(row)
        self._session.flush()
        return row.id

    def add_line(self, order_id: int, line: OrderLine) -> int:
        row = OrderItemRow(
            order_id=order_id,
            product_id=line.product_id,
            quantity=line.quantity.value,
            unit_price_cents=line.unit_price.to_cents(),
        )
        self._session.add(row)
        self._session.flush()
        return row.id

    def get_by_id(self, order_id: int) -> Order | None:
        header = self._session.get(OrderRow, order_id)
        if header is None:
            return None

        items = self._session.scalars(
            select(OrderItemRow)
            .where(OrderItemRow.order_id == order_id)
            .order_by(OrderItemRow.id)
        ).all()
        if not items:
            logger.error("Order #%d has a header but no lines", order_id)
            return None

        created_at = header.created_at
        if created_at.tzinfo is None:
            # SQLite drops the offset; everything is written in UTC
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Order(
            id=header.id,
            customer_name=header.customer_name,
            email=header.email,
            address=header.address,
            total=Money.from_cents(header.total_cents),
            lines=tuple(
                OrderLine(
                    id=item.id,
                    order_id=item.order_id,
                    product_id=item.product_id,
                    quantity=Quantity(item.quantity),
                    unit_price=Money.from_cents(item.unit_price_cents),
                )
                for item in items
            ),
            created_at=created_at,
        )
