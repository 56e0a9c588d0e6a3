"""DeleteOrder Use Case

Removing an order returns the units of every line to stock in the same
transaction as the delete.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.delivery_repository import DeliveryRepository
from src.app.repositories.inventory_repository import InventoryRepository
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.use_cases.failures import store_failure
from .compute_order_total import ComputeOrderTotal
from .dtos import OrderResponseDTO

logger = logging.getLogger(__name__)


class DeleteOrder:
    """
    Use Case: Delete an order and restock its lines

    Business Rules:
    1. Order must exist
    2. Orders with a payment or a delivery are kept (ORDER_IN_USE)
    3. Each line's quantity returns to stock before the line is removed
    4. Atomic updates: restocking, line deletes and order delete commit together

    Flow:
    1. Get order with lock, so no line can be added meanwhile
    2. Reject paid or dispatched orders
    3. Value the order for the response
    4. For each line in item_no order: lock item, delete line, increment stock
    5. Delete order
    6. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        order_repo: OrderRepository,
        order_line_repo: OrderLineRepository,
        inventory_repo: InventoryRepository,
        payment_repo: PaymentRepository,
        delivery_repo: DeliveryRepository,
    ):
        self.uow = uow
        self.order_repo = order_repo
        self.order_line_repo = order_line_repo
        self.inventory_repo = inventory_repo
        self.payment_repo = payment_repo
        self.delivery_repo = delivery_repo
        self.valuation = ComputeOrderTotal(order_line_repo)

    async def execute(self, order_no: int) -> Result[OrderResponseDTO]:
        """
        Errors:
            ORDER_NOT_FOUND, ORDER_IN_USE, TRANSIENT_STORE_FAILURE
        """
        try:
            order = await self.order_repo.get_by_order_no(order_no, for_update=True)
            if not order:
                await self.uow.rollback()
                return Return.err(Error(code="ORDER_NOT_FOUND", message=f"Order {order_no} not found"))

            if await self.payment_repo.exists_for_order(order_no):
                await self.uow.rollback()
                return Return.err(self._in_use_error(order_no, "payment"))

            if await self.delivery_repo.get_status(order_no):
                await self.uow.rollback()
                return Return.err(self._in_use_error(order_no, "delivery"))

            total = (await self.valuation.execute(order_no)).value
            response = OrderResponseDTO(
                order_no=order.order_no,
                order_date=order.order_date,
                customer_no=order.customer_no,
                address=order.address,
                amount=total.amount,
            )

            rows = await self.order_line_repo.list_by_order(order_no)
            for item_no in sorted(line.item_no for line, _ in rows):
                await self.inventory_repo.get_by_item_no(item_no, for_update=True)
                line = await self.order_line_repo.get(order_no, item_no)
                if not line:
                    continue
                quantity = line.quantity
                await self.order_line_repo.delete(line)
                await self.inventory_repo.increment_quantity(item_no, quantity)
                logger.info(f"Order line restocked: order={order_no} item={item_no} qty=+{quantity}")

            await self.order_repo.delete(order)
            await self.uow.commit()

            logger.info(f"Order deleted: order={order_no} lines={len(rows)}")
            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Order delete failed for order {order_no}: {e}")
            return Return.err(store_failure(self.uow, e, "DELETE_ORDER_FAILED", "Failed to delete order"))

    def _in_use_error(self, order_no: int, referenced_by: str) -> Error:
        return Error(
            code="ORDER_IN_USE",
            message=f"Order {order_no} has a {referenced_by} and cannot be deleted",
            reason=f"referenced_by={referenced_by}",
        )
