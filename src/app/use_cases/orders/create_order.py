"""CreateOrder Use Case"""

from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.order_repository import OrderRepository
from src.app.use_cases.failures import store_failure
from src.domain.order import Order
from src.domain.valuation import order_total
from .dtos import CreateOrderCommandDTO, OrderResponseDTO


class CreateOrder:
    """
    Use Case: Create an order header

    A new order has no lines, so its amount starts at 0.00.
    """

    def __init__(self, uow: UnitOfWork, order_repo: OrderRepository):
        self.uow = uow
        self.order_repo = order_repo

    async def execute(self, command: CreateOrderCommandDTO) -> Result[OrderResponseDTO]:
        try:
            existing = await self.order_repo.get_by_order_no(command.order_no)
            if existing:
                return Return.err(
                    Error(
                        code="ORDER_EXISTS",
                        message=f"Order {command.order_no} already exists",
                    )
                )

            order = await self.order_repo.create(
                Order(
                    order_no=command.order_no,
                    order_date=command.order_date,
                    customer_no=command.customer_no,
                    address=command.address,
                )
            )
            await self.uow.commit()

            return Return.ok(
                OrderResponseDTO(
                    order_no=order.order_no,
                    order_date=order.order_date,
                    customer_no=order.customer_no,
                    address=order.address,
                    amount=order_total([]),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            if self.uow.is_unique_violation(e):
                return Return.err(
                    Error(code="ORDER_EXISTS", message=f"Order {command.order_no} already exists")
                )
            return Return.err(store_failure(self.uow, e, "CREATE_ORDER_FAILED", "Failed to create order"))
