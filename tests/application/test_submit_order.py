"""Integration tests for the SubmitOrder use case.

Uses in-memory fake repositories — no file I/O.
"""

import pytest

from storefront.application.dto import OrderItemSpec, SubmitOrderRequest
from storefront.application.show_order import ShowOrderHandler
from storefront.application.submit_order import SUCCESS_MESSAGE, SubmitOrderHandler
from storefront.domain.exceptions import (
    CheckoutValidationError,
    EmptyCartError,
    OrderSubmissionFailed,
    TotalMismatchError,
    ValidationError,
)
from tests.fakes import FakeOrderRepository, FakeUnitOfWork


def _request(items=None, client_total="25.00", **customer) -> SubmitOrderRequest:
    if items is None:
        items = [
            OrderItemSpec(product_id=1, quantity=2, unit_price="10.00"),
            OrderItemSpec(product_id=2, quantity=1, unit_price="5.00"),
        ]
    return SubmitOrderRequest(
        customer_name=customer.get("customer_name", "Alice"),
        email=customer.get("email", "alice@example.com"),
        address=customer.get("address", "1 Main St"),
        items=items,
        client_total=client_total,
    )


def _setup(fail_on_line=None):
    uow = FakeUnitOfWork(FakeOrderRepository(fail_on_line=fail_on_line))
    return SubmitOrderHandler(lambda: uow), uow


class TestSubmitOrderHappyPath:

    def test_returns_new_order_id(self):
        handler, _ = _setup()
        confirmation = handler.handle(_request())
        assert confirmation.order_id == 1
        assert confirmation.total == "$25.00"
        assert confirmation.message == SUCCESS_MESSAGE

    def test_persists_header_and_all_lines(self):
        handler, uow = _setup()
        confirmation = handler.handle(_request())

        dto = ShowOrderHandler(lambda: uow).handle(confirmation.order_id)
        assert dto.total == "$25.00"
        assert len(dto.lines) == 2
        assert [(l.product_id, l.quantity, l.unit_price) for l in dto.lines] == [
            (1, 2, "$10.00"),
            (2, 1, "$5.00"),
        ]

    def test_commits_once(self):
        handler, uow = _setup()
        handler.handle(_request())
        assert uow.committed == 1
        assert uow.rolled_back == 0

    def test_ids_increase(self):
        handler, _ = _setup()
        first = handler.handle(_request())
        second = handler.handle(_request())
        assert second.order_id > first.order_id

    def test_float_client_total_accepted(self):
        handler, _ = _setup()
        items = [OrderItemSpec(product_id=i, quantity=1, unit_price=0.1) for i in range(1, 4)]
        # 0.1 + 0.1 + 0.1 in binary floating point
        confirmation = handler.handle(_request(items=items, client_total=0.30000000000000004))
        assert confirmation.total == "$0.30"


class TestSubmitOrderRejections:

    def test_empty_items(self):
        handler, uow = _setup()
        with pytest.raises(EmptyCartError):
            handler.handle(_request(items=[], client_total="0"))
        assert uow.orders.headers == {}

    def test_invalid_customer_fields(self):
        handler, uow = _setup()
        with pytest.raises(CheckoutValidationError) as excinfo:
            handler.handle(_request(customer_name="", email="nope"))
        assert set(excinfo.value.errors) == {"customer_name", "email"}
        assert excinfo.value.kind == "validation_error"
        assert uow.committed == 0

    def test_total_mismatch(self):
        handler, uow = _setup()
        with pytest.raises(TotalMismatchError) as excinfo:
            handler.handle(_request(client_total="20.00"))
        assert excinfo.value.kind == "total_mismatch"
        assert uow.orders.headers == {}

    def test_total_within_tolerance_accepted(self):
        handler, _ = _setup()
        assert handler.handle(_request(client_total="25.004")).order_id == 1

    def test_total_just_outside_tolerance_rejected(self):
        handler, _ = _setup()
        with pytest.raises(TotalMismatchError):
            handler.handle(_request(client_total="25.006"))

    def test_non_positive_quantity(self):
        handler, _ = _setup()
        items = [OrderItemSpec(product_id=1, quantity=0, unit_price="10.00")]
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(_request(items=items, client_total="0"))

    def test_sub_cent_unit_price_rejected_before_storage(self):
        opened = []

        def factory():
            opened.append(FakeUnitOfWork())
            return opened[-1]

        handler = SubmitOrderHandler(factory)
        items = [
            OrderItemSpec(product_id=1, quantity=3, unit_price="0.333"),
            OrderItemSpec(product_id=2, quantity=3, unit_price="0.333"),
        ]
        with pytest.raises(ValidationError, match="not a whole number of cents") as excinfo:
            handler.handle(_request(items=items, client_total="1.998"))
        assert excinfo.value.kind == "validation_error"
        assert opened == []


class TestSubmitOrderAtomicity:

    def test_failure_between_header_and_lines_leaves_nothing(self):
        handler, uow = _setup(fail_on_line=1)
        with pytest.raises(OrderSubmissionFailed) as excinfo:
            handler.handle(_request())
        assert excinfo.value.kind == "order_submission_failed"
        assert isinstance(excinfo.value.__cause__, RuntimeError)
        assert uow.orders.headers == {}
        assert uow.orders.lines == {}
        assert uow.rolled_back == 1

    def test_failure_on_last_line_leaves_nothing(self):
        handler, uow = _setup(fail_on_line=2)
        with pytest.raises(OrderSubmissionFailed):
            handler.handle(_request())
        assert uow.orders.headers == {}
        assert uow.orders.lines == {}


class InterleavingOrderRepository(FakeOrderRepository):
    """Runs *interleave* once, in the middle of the first line write."""

    def __init__(self, interleave) -> None:
        super().__init__()
        self._interleave = interleave

    def add_line(self, order_id, line):
        interleave, self._interleave = self._interleave, None
        if interleave is not None:
            interleave()
        return super().add_line(order_id, line)


class TestSubmitOrderOverlap:

    def test_overlapping_submissions_use_separate_units_of_work(self):
        other = _request(
            items=[OrderItemSpec(product_id=9, quantity=1, unit_price="4.00")],
            client_total="4.00",
        )
        nested = []
        opened = []

        def factory():
            if not opened:
                repo = InterleavingOrderRepository(lambda: nested.append(handler.handle(other)))
                uow = FakeUnitOfWork(repo)
            else:
                uow = FakeUnitOfWork()
            opened.append(uow)
            return uow

        handler = SubmitOrderHandler(factory)
        handler.handle(_request())

        first, second = opened
        assert [l.product_id for l in first.orders.lines[1]] == [1, 2]
        assert [l.product_id for l in second.orders.lines[nested[0].order_id]] == [9]
        assert (first.committed, second.committed) == (1, 1)
        assert first.rolled_back == second.rolled_back == 0
