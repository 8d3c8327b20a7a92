"""
SQLAlchemy implementation of the Unit of Work.

Entering the unit of work opens a Session; the header and line inserts
share its transaction.  Commit on success, rollback on any exception.
The Session lives on the instance, so callers create one unit of work
per request (``bootstrap.unit_of_work`` is the factory).
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.unit_of_work import AbstractUnitOfWork
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository

logger = logging.getLogger(__name__)


class SqlUnitOfWork(AbstractUnitOfWork):

    orders: SqlOrderRepository

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def _begin(self) -> None:
        self._session = self._session_factory()
        self.orders = SqlOrderRepository(self._session)

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
