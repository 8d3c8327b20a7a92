"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON and SQL
repositories but keep everything in dicts. No file I/O, no side effects.
"""

from __future__ import annotations

from dataclasses import replace

from storefront.domain.model.order import Order, OrderLine
from storefront.domain.model.product import Product
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.unit_of_work import AbstractUnitOfWork


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return sorted(self._store.values(), key=lambda p: p.id)

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeOrderRepository(OrderRepository):
    """Stages writes until the owning unit of work commits.

    ``fail_on_line`` makes the N-th ``add_line`` call (1-based) raise,
    simulating a storage failure between the header and line writes.
    """

    def __init__(self, fail_on_line: int | None = None) -> None:
        self.headers: dict[int, Order] = {}
        self.lines: dict[int, list[OrderLine]] = {}
        self._staged_headers: dict[int, Order] = {}
        self._staged_lines: dict[int, list[OrderLine]] = {}
        self._next_order_id = 1
        self._next_line_id = 1
        self._fail_on_line = fail_on_line
        self._line_calls = 0

    def add_header(self, order: Order) -> int:
        order_id = self._next_order_id
        self._next_order_id += 1
        self._staged_headers[order_id] = replace(order, id=order_id, lines=())
        self._staged_lines[order_id] = []
        return order_id

    def add_line(self, order_id: int, line: OrderLine) -> int:
        self._line_calls += 1
        if self._fail_on_line is not None and self._line_calls == self._fail_on_line:
            raise RuntimeError("simulated storage failure")
        line_id = self._next_line_id
        self._next_line_id += 1
        self._staged_lines[order_id].append(replace(line, id=line_id, order_id=order_id))
        return line_id

    def get_by_id(self, order_id: int) -> Order | None:
        header = self.headers.get(order_id)
        if header is None:
            return None
        return replace(header, lines=tuple(self.lines.get(order_id, [])))

    def commit(self) -> None:
        self.headers.update(self._staged_headers)
        self.lines.update(self._staged_lines)
        self._discard()

    def rollback(self) -> None:
        self._discard()

    def _discard(self) -> None:
        self._staged_headers = {}
        self._staged_lines = {}


class FakeUnitOfWork(AbstractUnitOfWork):

    def __init__(self, orders: FakeOrderRepository | None = None) -> None:
        self.orders = orders or FakeOrderRepository()
        self.committed = 0
        self.rolled_back = 0

    def commit(self) -> None:
        self.orders.commit()
        self.committed += 1

    def rollback(self) -> None:
        self.orders.rollback()
        self.rolled_back += 1
