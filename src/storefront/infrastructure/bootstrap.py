"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers
and the only reader of Settings.  Every other module depends only on
abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.orm import sessionmaker

from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.unit_of_work import AbstractUnitOfWork
from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.persistence.json_cart_store import JsonCartStore
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork
from storefront.infrastructure.persistence.sql_models import (
    build_engine,
    build_session_factory,
)
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from storefront.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork


@lru_cache(maxsize=None)
def settings() -> Settings:
    return load_settings()


@lru_cache(maxsize=None)
def _session_factory(database_url: str) -> sessionmaker:
    return build_session_factory(build_engine(database_url))


def product_repository() -> ProductRepository:
    cfg = settings()
    if cfg.backend == "sql":
        return SqlProductRepository(_session_factory(cfg.database_url))
    return JsonProductRepository(cfg.products_file)


def unit_of_work() -> AbstractUnitOfWork:
    cfg = settings()
    if cfg.backend == "sql":
        return SqlUnitOfWork(_session_factory(cfg.database_url))
    return JsonUnitOfWork(cfg.orders_file)


def cart_store() -> JsonCartStore:
    return JsonCartStore(settings().cart_file)


def reset() -> None:
    """Forget cached settings and engines (used when the environment changes)."""
    settings.cache_clear()
    _session_factory.cache_clear()
