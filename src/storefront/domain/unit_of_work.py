"""Unit of Work — the transaction boundary for order writes.

Used as a context manager:

    with uow:
        order_id = uow.orders.add_header(order)
        for line in order.lines:
            uow.orders.add_line(order_id, line)

Leaving the block normally commits; leaving it with an exception rolls
back, so either the header and every line are stored or none of them
are.  A failing commit is rolled back too.

An instance holds the state of one transaction.  Handlers take a
``UnitOfWorkFactory`` and open a new instance per request.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from storefront.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):

    orders: OrderRepository
    _active = False

    def __enter__(self) -> AbstractUnitOfWork:
        if self._active:
            raise RuntimeError(f"{type(self).__name__} is already in a transaction")
        self._begin()
        self._active = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is None:
                try:
                    self.commit()
                except Exception:
                    self.rollback()
                    raise
                logger.debug("Transaction committed")
            else:
                self.rollback()
                logger.debug("Transaction rolled back after %s", exc_type.__name__)
        finally:
            self._active = False
            self.close()

    def _begin(self) -> None:
        """Open the underlying transaction (no-op by default)."""

    @abstractmethod
    def commit(self) -> None:
        """Make every staged write durable at once."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every staged write."""

    def close(self) -> None:
        """Release resources (no-op by default)."""


UnitOfWorkFactory = Callable[[], AbstractUnitOfWork]
