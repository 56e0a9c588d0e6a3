"""Order read Use Cases

Every read recomputes the amount from current lines and prices.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from src.domain.order import Order
from .compute_order_total import ComputeOrderTotal
from .dtos import OrderResponseDTO


class GetOrder:
    """
    Get Order Use Case

    Errors:
        ORDER_NOT_FOUND: No order with this number (checked before valuation)
    """

    def __init__(self, order_repo: OrderRepository, order_line_repo: OrderLineRepository):
        self.order_repo = order_repo
        self.valuation = ComputeOrderTotal(order_line_repo)

    async def execute(self, order_no: int) -> Result[OrderResponseDTO]:
        order = await self.order_repo.get_by_order_no(order_no)
        if not order:
            return Return.err(
                Error(
                    code="ORDER_NOT_FOUND",
                    message=f"Order {order_no} not found",
                )
            )
        return Return.ok(await _with_amount(order, self.valuation))


class ListOrders:
    def __init__(self, order_repo: OrderRepository, order_line_repo: OrderLineRepository):
        self.order_repo = order_repo
        self.valuation = ComputeOrderTotal(order_line_repo)

    async def execute(self) -> Result[List[OrderResponseDTO]]:
        orders = await self.order_repo.list_all()
        return Return.ok([await _with_amount(order, self.valuation) for order in orders])


async def _with_amount(order: Order, valuation: ComputeOrderTotal) -> OrderResponseDTO:
    total = (await valuation.execute(order.order_no)).value
    return OrderResponseDTO(
        order_no=order.order_no,
        order_date=order.order_date,
        customer_no=order.customer_no,
        address=order.address,
        amount=total.amount,
    )
