"""Client-side cart session kept in a JSON file.

The CLI runs one command per process, so the cart a shopper builds up
across ``storefront cart ...`` invocations is stored here between runs.
Nothing in this file is ever read by the order side.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_files import write_json_atomically

logger = logging.getLogger(__name__)


class CorruptCartSession(DomainException):
    """The saved cart file cannot be read back."""

    kind = "corrupt_cart_session"


class JsonCartStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> Cart:
        if not self._file_path.exists():
            return Cart()
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return Cart(
                [
                    CartLine(
                        product_id=item["product_id"],
                        name=item["name"],
                        unit_price=Money(Decimal(item["unit_price"])),
                        image=item.get("image", ""),
                        quantity=item["quantity"],
                    )
                    for item in raw
                ]
            )
        except (ValueError, KeyError, TypeError, AttributeError, InvalidOperation) as exc:
            logger.warning("Unreadable cart session %s: %s", self._file_path, exc)
            raise CorruptCartSession(
                f"Your saved cart at {self._file_path} is unreadable. "
                "Run 'storefront cart clear' to start a new cart."
            ) from exc

    def save(self, cart: Cart) -> None:
        raw = [
            {
                "product_id": line.product_id,
                "name": line.name,
                "unit_price": str(line.unit_price.amount),
                "image": line.image,
                "quantity": line.quantity,
            }
            for line in cart.lines
        ]
        write_json_atomically(self._file_path, raw)
