"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderLineDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.unit_of_work import UnitOfWorkFactory


class ShowOrderHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow_factory() as uow:
            order = uow.orders.get_by_id(order_id)
        if order is None or not order.lines:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return self._to_dto(order)

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer_name,
            email=order.email,
            address=order.address,
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            lines=[
                OrderLineDTO(
                    product_id=line.product_id,
                    quantity=line.quantity.value,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in order.lines
            ],
        )
