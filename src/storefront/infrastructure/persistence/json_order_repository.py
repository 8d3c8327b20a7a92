"""JSON-document-backed implementation of OrderRepository.

Works on an in-memory order document owned by JsonUnitOfWork; it never
touches the file itself.  The document keeps two record stores related
by order id, plus one monotonic counter per store:

    {
      "next_order_id": 3,
      "next_line_id": 5,
      "orders": [{"id": 1, "customer_name": ..., "total": "25.00", ...}],
      "order_items": [{"id": 1, "order_id": 1, "product_id": 7, ...}]
    }

Counters only ever grow, so an id is never handed out twice even if the
highest-numbered order were removed from the file by hand.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def empty_document() -> dict:
    return {"next_order_id": 1, "next_line_id": 1, "orders": [], "order_items": []}


class JsonOrderRepository(OrderRepository):

    def __init__(self, document: dict) -> None:
        self._doc = document
        self.dirty = False

    @property
    def document(self) -> dict:
        return self._doc

    # --- OrderRepository interface --------------------------------------------

    def add_header(self, order: Order) -> int:
        order_id = self._take_id("next_order_id")
        self._doc["orders"].append(
            {
                "id": order_id,
                "customer_name": order.customer_name,
                "email": order.email,
                "address": order.address,
                "total": str(order.total.amount),
                "created_at": order.created_at.isoformat(),
            }
        )
        self.dirty = True
        return order_id

    def add_line(self, order_id: int, line: OrderLine) -> int:
        if not any(raw["id"] == order_id for raw in self._doc["orders"]):
            raise KeyError(f"No order header with id {order_id}")
        line_id = self._take_id("next_line_id")
        self._doc["order_items"].append(
            {
                "id": line_id,
                "order_id": order_id,
                "product_id": line.product_id,
                "quantity": line.quantity.value,
                "unit_price": str(line.unit_price.amount),
            }
        )
        self.dirty = True
        return line_id

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._doc["orders"]:
            if raw["id"] == order_id:
                items = [i for i in self._doc["order_items"] if i["order_id"] == order_id]
                if not items:
                    logger.error("Order #%d has a header but no lines", order_id)
                    return None
                return self._to_domain(raw, items)
        return None

    # --- Helpers --------------------------------------------------------------

    def _take_id(self, counter: str) -> int:
        value = self._doc[counter]
        self._doc[counter] = value + 1
        return value

    @staticmethod
    def _to_domain(raw: dict, items: list[dict]) -> Order:
        lines = tuple(
            OrderLine(
                id=i["id"],
                order_id=i["order_id"],
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"])),
            )
            for i in sorted(items, key=lambda i: i["id"])
        )
        return Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            email=raw["email"],
            address=raw["address"],
            total=Money(Decimal(raw["total"])),
            lines=lines,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
