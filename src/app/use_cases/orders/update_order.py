"""UpdateOrder Use Case"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from src.app.use_cases.failures import store_failure
from .compute_order_total import ComputeOrderTotal
from .dtos import UpdateOrderCommandDTO, OrderResponseDTO


class UpdateOrder:
    """
    Use Case: Change an order's date, customer or address

    Lines and the derived amount are untouched.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        order_repo: OrderRepository,
        order_line_repo: OrderLineRepository,
    ):
        self.uow = uow
        self.order_repo = order_repo
        self.valuation = ComputeOrderTotal(order_line_repo)

    async def execute(self, command: UpdateOrderCommandDTO) -> Result[OrderResponseDTO]:
        try:
            order = await self.order_repo.get_by_order_no(command.order_no)
            if not order:
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {command.order_no} not found",
                    )
                )

            order.order_date = command.order_date
            order.customer_no = command.customer_no
            order.address = command.address
            order = await self.order_repo.update(order)

            total = (await self.valuation.execute(order.order_no)).value
            await self.uow.commit()

            return Return.ok(
                OrderResponseDTO(
                    order_no=order.order_no,
                    order_date=order.order_date,
                    customer_no=order.customer_no,
                    address=order.address,
                    amount=total.amount,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(store_failure(self.uow, e, "UPDATE_ORDER_FAILED", "Failed to update order"))
