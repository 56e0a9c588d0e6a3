"""UpdateOrderLine Use Case

Changes the quantity of an existing order line and moves the difference
in or out of stock in a single transaction.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.inventory_repository import InventoryRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from src.app.use_cases.failures import store_failure
from src.app.use_cases.stock.errors import insufficient_stock
from .dtos import UpdateOrderLineCommandDTO, OrderLineResponseDTO

logger = logging.getLogger(__name__)


class UpdateOrderLine:
    """
    Use Case: Change an ordered quantity

    Business Rules:
    1. quantity must be positive
    2. Line must exist
    3. Raising the quantity takes the extra units through the bounded
       decrement; INSUFFICIENT_STOCK reports what is on hand
    4. Lowering the quantity returns the difference to stock
    5. Atomic updates: line update and stock movement commit together

    Flow:
    1. Validate quantity
    2. Get item with lock (SELECT FOR UPDATE)
    3. Get line
    4. Apply stock delta
    5. Update line
    6. Commit transaction
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

    async def execute(self, command: UpdateOrderLineCommandDTO) -> Result[OrderLineResponseDTO]:
        """
        Errors:
            INVALID_INPUT, ORDER_LINE_NOT_FOUND,
            INSUFFICIENT_STOCK (details.available), TRANSIENT_STORE_FAILURE
        """
        if command.quantity <= 0:
            return Return.err(
                Error(
                    code="INVALID_INPUT",
                    message="Ordered quantity must be greater than 0",
                    reason=f"quantity={command.quantity}",
                )
            )

        try:
            item = await self.inventory_repo.get_by_item_no(command.item_no, for_update=True)
            line = await self.order_line_repo.get(command.order_no, command.item_no) if item else None
            if not line:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ORDER_LINE_NOT_FOUND",
                        message=f"Item {command.item_no} is not on order {command.order_no}",
                    )
                )

            delta = command.quantity - line.quantity

            if delta > 0:
                available = item.quantity
                if available < delta:
                    await self.uow.rollback()
                    return Return.err(insufficient_stock(command.item_no, delta, available))

                updated_item = await self.inventory_repo.decrement_quantity(command.item_no, delta)
                if updated_item is None:
                    await self.uow.rollback()
                    current = await self.inventory_repo.get_by_item_no(command.item_no)
                    available = current.quantity if current else 0
                    return Return.err(insufficient_stock(command.item_no, delta, available))
            elif delta < 0:
                updated_item = await self.inventory_repo.increment_quantity(command.item_no, -delta)
            else:
                updated_item = item

            line.quantity = command.quantity
            line = await self.order_line_repo.update(line)

            await self.uow.commit()

            logger.info(
                f"Order line changed: order={command.order_no} item={command.item_no} "
                f"qty={-delta:+d} on_hand={updated_item.quantity}"
            )

            return Return.ok(
                OrderLineResponseDTO(
                    order_no=line.order_no,
                    item_no=line.item_no,
                    item_name=updated_item.name,
                    quantity=line.quantity,
                    quantity_on_hand=updated_item.quantity,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(
                f"Order line update failed for order {command.order_no} item {command.item_no}: {e}"
            )
            return Return.err(
                store_failure(self.uow, e, "UPDATE_ORDER_LINE_FAILED", "Failed to update order line")
            )
