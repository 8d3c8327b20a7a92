"""Application service: Checkout use case (client side).

Gates a submission on the client before anything is sent: an empty cart
short-circuits first, then field validation.  Only a valid, non-empty
cart is turned into a SubmitOrderRequest.  The cart is cleared after a
confirmed submission and left exactly as it was after any failure, so
the user can retry without re-adding items.
"""

from __future__ import annotations

import logging
from typing import Callable

from storefront.application.dto import (
    OrderConfirmationDTO,
    OrderItemSpec,
    SubmitOrderRequest,
)
from storefront.domain.exceptions import CheckoutValidationError, EmptyCartError
from storefront.domain.model.cart import Cart
from storefront.domain.service.order_validator import CheckoutForm, validate_checkout

logger = logging.getLogger(__name__)

SubmitOrder = Callable[[SubmitOrderRequest], OrderConfirmationDTO]


class CheckoutHandler:

    def __init__(self, cart: Cart, submit: SubmitOrder) -> None:
        self._cart = cart
        self._submit = submit

    def handle(self, form: CheckoutForm) -> OrderConfirmationDTO:
        if self._cart.is_empty:
            raise EmptyCartError()

        errors = validate_checkout(form, self._cart.lines)
        if errors:
            raise CheckoutValidationError(errors)

        confirmation = self._submit(self._to_request(form, self._cart))

        # Only reached on success; any exception above leaves the cart alone
        self._cart.clear()
        logger.debug("Cart cleared after order #%d", confirmation.order_id)
        return confirmation

    @staticmethod
    def _to_request(form: CheckoutForm, cart: Cart) -> SubmitOrderRequest:
        return SubmitOrderRequest(
            customer_name=form.customer_name,
            email=form.email,
            address=form.address,
            items=[
                OrderItemSpec(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price.amount,
                )
                for line in cart.lines
            ],
            client_total=cart.total().amount,
        )
