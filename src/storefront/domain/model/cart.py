"""Cart aggregate — the client-side collection of intended purchases.

A Cart is owned by a single session and passed explicitly to whatever
needs it.  Every change goes through the methods below, which keep two
invariants:

- at most one CartLine per product id
- every line's quantity is >= 1 (going below 1 removes the line)

Listeners registered with ``subscribe()`` are called synchronously after
each effective mutation, so anything displaying the item count or
running total sees the new state before the next user action.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Callable

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

CartListener = Callable[["Cart"], None]


@dataclass(frozen=True)
class CartLine:
    """A product snapshot taken when it was first added, plus a quantity."""

    product_id: int
    name: str
    unit_price: Money
    image: str
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


class Cart:

    def __init__(self, lines: list[CartLine] | None = None) -> None:
        # dict preserves insertion order, which is also display order
        self._lines: dict[int, CartLine] = {}
        self._listeners: list[CartListener] = []
        for line in lines or []:
            if line.quantity >= 1:
                self._lines[line.product_id] = line

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> None:
        """Add one unit of *product*, merging with an existing line."""
        existing = self._lines.get(product.id)
        if existing is not None:
            self._lines[product.id] = replace(existing, quantity=existing.quantity + 1)
        else:
            self._lines[product.id] = CartLine(
                product_id=product.id,
                name=product.name,
                unit_price=product.price,
                image=product.image,
                quantity=1,
            )
        self._notify()

    def remove(self, product_id: int) -> None:
        if self._lines.pop(product_id, None) is not None:
            self._notify()

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Replace a line's quantity; anything below 1 removes the line."""
        if quantity < 1:
            self.remove(product_id)
            return
        existing = self._lines.get(product_id)
        if existing is None or existing.quantity == quantity:
            return
        self._lines[product_id] = replace(existing, quantity=quantity)
        self._notify()

    def clear(self) -> None:
        if self._lines:
            self._lines.clear()
            self._notify()

    # --- Queries --------------------------------------------------------------

    def total(self) -> Money:
        """Exact sum of price x quantity over all lines (no rounding)."""
        result = Money(Decimal("0"))
        for line in self._lines.values():
            result = result + line.line_total
        return result

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def get(self, product_id: int) -> CartLine | None:
        return self._lines.get(product_id)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    # --- Observers ------------------------------------------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
