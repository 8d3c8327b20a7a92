"""Abstract repository for the Order aggregate.

Writes are split into header and line inserts so the submission handler
can run them inside one unit of work.  Implementations must not make
either write visible to readers before the unit of work commits.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderLine


class OrderRepository(ABC):

    @abstractmethod
    def add_header(self, order: Order) -> int:
        """Stage the order header; return its generated ID."""

    @abstractmethod
    def add_line(self, order_id: int, line: OrderLine) -> int:
        """Stage one line under *order_id*; return the line's generated ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order with all of its lines, or None if not found."""
