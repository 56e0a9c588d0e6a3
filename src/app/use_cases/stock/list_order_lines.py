"""List Order Lines Use Case

Read-only listing of the items on one order.
"""

from libs.result import Result, Return, Error
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from .dtos import OrderLineResponseDTO, OrderLinesResponseDTO


class ListOrderLines:
    def __init__(self, order_repo: OrderRepository, order_line_repo: OrderLineRepository):
        self.order_repo = order_repo
        self.order_line_repo = order_line_repo

    async def execute(self, order_no: int) -> Result[OrderLinesResponseDTO]:
        order = await self.order_repo.get_by_order_no(order_no)
        if not order:
            return Return.err(
                Error(
                    code="ORDER_NOT_FOUND",
                    message=f"Order {order_no} not found",
                )
            )

        rows = await self.order_line_repo.list_by_order(order_no)
        return Return.ok(
            OrderLinesResponseDTO(
                order_no=order_no,
                lines=[
                    OrderLineResponseDTO(
                        order_no=line.order_no,
                        item_no=line.item_no,
                        item_name=item_name,
                        quantity=line.quantity,
                    )
                    for line, item_name in rows
                ],
            )
        )
