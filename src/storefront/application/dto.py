"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one submitted line (product id, quantity, price at add time)."""

    product_id: int
    quantity: int
    unit_price: Decimal | str | float


@dataclass(frozen=True)
class SubmitOrderRequest:
    """Input: everything the client sends when placing an order."""

    customer_name: str
    email: str
    address: str
    items: list[OrderItemSpec]
    client_total: Decimal | str | float


@dataclass(frozen=True)
class OrderConfirmationDTO:
    """Output: the result of a successful submission."""

    order_id: int
    total: str  # formatted, e.g. "$25.00"
    message: str


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    product_id: int
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    email: str
    address: str
    total: str
    created_at: str
    lines: list[OrderLineDTO]


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: int
    name: str
    description: str
    price: str
    category: str
    image: str
    stock: int
