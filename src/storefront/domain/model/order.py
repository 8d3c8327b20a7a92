"""Order aggregate — the durable record of a completed checkout.

An Order (the header) owns its line items.  It is immutable once placed:
there is no status machine and no update path.  The header total is
fixed at creation and always equals the sum of its lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """Captures the price of a product at order time.

    ``product_id`` is a historical reference; the product may later be
    removed from the catalog or repriced without affecting this line.
    """

    product_id: int
    quantity: Quantity
    unit_price: Money  # locked at order time
    id: int | None = None
    order_id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.place()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_name: str
    email: str
    address: str
    total: Money
    lines: tuple[OrderLine, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(
        customer_name: str,
        email: str,
        address: str,
        lines: list[OrderLine],
    ) -> Order:
        """Create a new, not yet persisted order."""
        if not lines:
            raise ValidationError("Order must contain at least one item")

        product_ids = [line.product_id for line in lines]
        if len(set(product_ids)) != len(product_ids):
            raise ValidationError("Each product may appear only once per order")

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            email=email.strip(),
            address=address.strip(),
            total=compute_total(lines),
            lines=tuple(lines),
        )


def compute_total(lines) -> Money:
    """Sum of unit_price x quantity over *lines* at full precision."""
    result = Money.zero()
    for line in lines:
        result = result + line.line_total
    return result
