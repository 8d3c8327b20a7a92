"""Domain-level exceptions.

All failures the storefront reports to a caller are subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.  Each subclass carries a ``kind`` string that
names the error category independently of the Python class.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "domain_error"


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = "validation_error"


class CheckoutValidationError(ValidationError):
    """One or more checkout form fields are invalid.

    ``errors`` maps a field name to its FieldError so the caller can
    show each message next to the offending field.
    """

    def __init__(self, errors: dict) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid checkout fields: {fields}")


class EmptyCartError(DomainException):
    """Checkout was attempted with nothing in the cart."""

    kind = "empty_cart"

    def __init__(self, message: str = "Your cart is empty") -> None:
        super().__init__(message)


class TotalMismatchError(DomainException):
    """The total sent by the client disagrees with the recomputed one."""

    kind = "total_mismatch"


class OrderSubmissionFailed(DomainException):
    """Storage failed while writing an order; nothing was persisted."""

    kind = "order_submission_failed"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = "not_found"
