"""CancelOrderLine Use Case

Removes a line from an order and returns its units to stock
in a single transaction.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.inventory_repository import InventoryRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from src.app.use_cases.failures import store_failure
from .dtos import OrderLineResponseDTO

logger = logging.getLogger(__name__)


class CancelOrderLine:
    """
    Use Case: Cancel an order line

    Business Rules:
    1. Line must exist
    2. Atomic updates: line delete and stock increment commit together
    """

    def __init__(
        self,
        uow: UnitOfWork,
        inventory_repo: InventoryRepository,
        order_line_repo: OrderLineRepository,
    ):
        self.uow = uow
        self.inventory_repo = inventory_repo
        self.order_line_repo = order_line_repo

    async def execute(self, order_no: int, item_no: int) -> Result[OrderLineResponseDTO]:
        try:
            # Lock the item first so cancellations and placements queue in the same order
            item = await self.inventory_repo.get_by_item_no(item_no, for_update=True)
            line = await self.order_line_repo.get(order_no, item_no) if item else None
            if not line:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ORDER_LINE_NOT_FOUND",
                        message=f"Item {item_no} is not on order {order_no}",
                    )
                )

            quantity = line.quantity
            await self.order_line_repo.delete(line)
            updated_item = await self.inventory_repo.increment_quantity(item_no, quantity)

            await self.uow.commit()

            logger.info(
                f"Order line cancelled: order={order_no} item={item_no} "
                f"qty=+{quantity} on_hand={updated_item.quantity}"
            )

            return Return.ok(
                OrderLineResponseDTO(
                    order_no=order_no,
                    item_no=item_no,
                    item_name=updated_item.name,
                    quantity=quantity,
                    quantity_on_hand=updated_item.quantity,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Order line cancellation failed for order {order_no} item {item_no}: {e}")
            return Return.err(
                store_failure(self.uow, e, "CANCEL_ORDER_LINE_FAILED", "Failed to cancel order line")
            )
