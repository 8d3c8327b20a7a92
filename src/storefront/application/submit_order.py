"""Application service: Submit Order use case.

Converts a submitted cart into a durable order.  The header and every
line are written inside one unit of work, so a failure part-way through
(including a crash before commit) leaves no orphaned header and no
partial set of lines behind.

The client-computed total is never trusted: it is recomputed from the
submitted lines and the submission is rejected if the two disagree by
more than half a cent.  Unit prices must be whole cents; the total is
then exact and is stored without rounding.

Every call to ``handle()`` opens its own unit of work from the factory,
so one handler can serve overlapping requests.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from storefront.application.dto import OrderConfirmationDTO, SubmitOrderRequest
from storefront.domain.exceptions import (
    CheckoutValidationError,
    DomainException,
    EmptyCartError,
    OrderSubmissionFailed,
    TotalMismatchError,
    ValidationError,
)
from storefront.domain.model.order import Order, OrderLine, compute_total
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.order_validator import CheckoutForm, validate_checkout
from storefront.domain.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)

TOTAL_TOLERANCE = Decimal("0.005")
SUCCESS_MESSAGE = "Order placed successfully!"


class SubmitOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, request: SubmitOrderRequest) -> OrderConfirmationDTO:
        """Place an order.

        Steps:
        1. Reject an empty item list and invalid customer fields.
        2. Reject unit prices that are not whole cents, then recompute the total and compare it with the client's.
        3. Write header + lines in one unit of work and commit.
        """
        if not request.items:
            raise EmptyCartError()

        form = CheckoutForm(request.customer_name, request.email, request.address)
        errors = validate_checkout(form, request.items)
        if errors:
            raise CheckoutValidationError(errors)

        lines = [
            OrderLine(
                product_id=item.product_id,
                quantity=Quantity(item.quantity),
                unit_price=Money.of(item.unit_price),  # <-- price snapshot
            )
            for item in request.items
        ]
        for line in lines:
            if not line.unit_price.is_whole_cents:
                raise ValidationError(
                    f"Unit price {line.unit_price.amount} for product #{line.product_id} "
                    "is not a whole number of cents"
                )

        server_total = compute_total(lines)
        client_total = Money.of(request.client_total)
        if server_total.difference(client_total) > TOTAL_TOLERANCE:
            logger.warning(
                "Rejected order for %s: client total %s, recomputed %s",
                request.email, client_total.amount, server_total.amount,
            )
            raise TotalMismatchError(
                f"Order total {client_total} does not match item total {server_total}"
            )

        order = Order.place(
            customer_name=request.customer_name,
            email=request.email,
            address=request.address,
            lines=lines,
        )
        order_id = self._persist(order)

        logger.info(
            "Order #%d placed: %d line(s), total %s", order_id, len(order.lines), order.total
        )
        return OrderConfirmationDTO(
            order_id=order_id, total=str(order.total), message=SUCCESS_MESSAGE
        )

    def _persist(self, order: Order) -> int:
        try:
            with self._uow_factory() as uow:
                order_id = uow.orders.add_header(order)
                for line in order.lines:
                    uow.orders.add_line(order_id, line)
        except DomainException:
            raise
        except Exception as exc:
            logger.error("Order submission rolled back: %s", exc, exc_info=True)
            raise OrderSubmissionFailed(
                "Your order could not be saved and nothing was stored. Please try again."
            ) from exc
        return order_id
