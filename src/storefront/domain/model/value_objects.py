"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Arithmetic keeps full Decimal precision.  Rounding to whole cents
    only happens for display (``str()``).  ``to_cents()`` never rounds:
    amounts that are not a whole number of cents cannot be stored as
    cents and are refused.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    def difference(self, other: Money) -> Decimal:
        """Absolute distance between two amounts."""
        return abs(self.amount - other.amount)

    # --- Display / storage ----------------------------------------------------

    def rounded(self) -> Decimal:
        return self.amount.quantize(CENT, rounding=ROUND_HALF_UP)

    @property
    def is_whole_cents(self) -> bool:
        return self.amount == self.amount.quantize(CENT)

    def to_cents(self) -> int:
        if not self.is_whole_cents:
            raise ValidationError(f"Amount {self.amount} is not a whole number of cents")
        return int(self.amount * 100)

    def __str__(self) -> str:
        return f"${self.rounded():.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def from_cents(cents: int) -> Money:
        return Money(Decimal(cents) / 100)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Floats go through ``str()`` so ``Money.of(0.1)`` is exactly 0.1
        rather than the nearest binary fraction.
        """
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
