"""Domain service: checkout form validation.

A pure function: it reads the form and the cart lines and returns a
mapping of field name to FieldError.  An empty mapping means the form
is valid.  Inputs are never modified.

The email check is deliberately loose: something, an ``@``, something,
a dot, something.  Real deliverability is not checked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from storefront.domain.exceptions import EmptyCartError

REQUIRED = "required"
INVALID_FORMAT = "invalid_format"

_EMAIL_SHAPE = re.compile(r"\S+@\S+\.\S+")


@dataclass(frozen=True)
class CheckoutForm:
    customer_name: str = ""
    email: str = ""
    address: str = ""


@dataclass(frozen=True)
class FieldError:
    code: str
    message: str


def validate_checkout(form: CheckoutForm, lines: Sequence) -> dict[str, FieldError]:
    """Validate a prospective order.

    Raises EmptyCartError before looking at any field when *lines* is
    empty; field errors are only meaningful for a non-empty cart.
    """
    if not lines:
        raise EmptyCartError()

    errors: dict[str, FieldError] = {}

    if _is_blank(form.customer_name):
        errors["customer_name"] = FieldError(REQUIRED, "Name is required")

    if _is_blank(form.email):
        errors["email"] = FieldError(REQUIRED, "Email is required")
    elif not _EMAIL_SHAPE.search(form.email):
        errors["email"] = FieldError(INVALID_FORMAT, "Email is invalid")

    if _is_blank(form.address):
        errors["address"] = FieldError(REQUIRED, "Address is required")

    return errors


def clear_field_error(errors: dict[str, FieldError], field: str) -> dict[str, FieldError]:
    """Return a copy of *errors* without *field* (e.g. once the user edits it)."""
    return {name: err for name, err in errors.items() if name != field}


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
