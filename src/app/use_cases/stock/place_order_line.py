"""PlaceOrderLine Use Case

Adds an item to an order and removes the ordered units from stock
in a single transaction. Never oversells.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.inventory_repository import InventoryRepository
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from src.app.use_cases.failures import store_failure
from src.app.use_cases.stock.errors import insufficient_stock
from src.domain.order_line import OrderLine
from .dtos import PlaceOrderLineCommandDTO, OrderLineResponseDTO

logger = logging.getLogger(__name__)


class PlaceOrderLine:
    """
    Use Case: Place an order line against stock

    Business Rules:
    1. quantity must be positive
    2. Order and item must exist
    3. (order_no, item_no) must not already exist: re-ordering is rejected
    4. Sufficient stock: quantity on hand >= requested quantity
    5. Atomic updates: line insert and stock decrement commit together
    6. Pessimistic locking plus bounded decrement: concurrent placements
       against the last units cannot both succeed

    Flow:
    1. Validate quantity
    2. Check order exists
    3. Get item with lock (SELECT FOR UPDATE)
    4. Reject duplicate line
    5. Validate sufficient stock
    6. Decrement stock (conditional UPDATE)
    7. Insert line
    8. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        inventory_repo: InventoryRepository,
        order_repo: OrderRepository,
        order_line_repo: OrderLineRepository,
    ):
        self.uow = uow
        self.inventory_repo = inventory_repo
        self.order_repo = order_repo
        self.order_line_repo = order_line_repo

    async def execute(self, command: PlaceOrderLineCommandDTO) -> Result[OrderLineResponseDTO]:
        """
        Execute order line placement

        Args:
            command: PlaceOrderLineCommandDTO with order_no, item_no, quantity

        Returns:
            Result[OrderLineResponseDTO]: Placed line with remaining stock, or error

        Errors:
            INVALID_INPUT, ORDER_NOT_FOUND, ITEM_NOT_FOUND, ORDER_LINE_EXISTS,
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
            order = await self.order_repo.get_by_order_no(command.order_no)
            if not order:
                return Return.err(
                    Error(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {command.order_no} not found",
                    )
                )

            item = await self.inventory_repo.get_by_item_no(command.item_no, for_update=True)
            if not item:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ITEM_NOT_FOUND",
                        message=f"Inventory item {command.item_no} not found",
                    )
                )

            existing_line = await self.order_line_repo.get(command.order_no, command.item_no)
            if existing_line:
                await self.uow.rollback()
                return Return.err(self._duplicate_error(command))

            # Rollback expires loaded rows; read the stock level first
            available = item.quantity
            if available < command.quantity:
                await self.uow.rollback()
                return Return.err(self._insufficient_error(command, available))

            updated_item = await self.inventory_repo.decrement_quantity(command.item_no, command.quantity)
            if updated_item is None:
                # Stock moved between the read and the guarded update
                await self.uow.rollback()
                current = await self.inventory_repo.get_by_item_no(command.item_no)
                available = current.quantity if current else 0
                return Return.err(self._insufficient_error(command, available))

            line = await self.order_line_repo.create(
                OrderLine(
                    order_no=command.order_no,
                    item_no=command.item_no,
                    quantity=command.quantity,
                )
            )

            await self.uow.commit()

            logger.info(
                f"Order line placed: order={command.order_no} item={command.item_no} "
                f"qty=-{command.quantity} on_hand={updated_item.quantity}"
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
            if self.uow.is_unique_violation(e):
                return Return.err(self._duplicate_error(command))
            logger.error(
                f"Order line placement failed for order {command.order_no} item {command.item_no}: {e}"
            )
            return Return.err(
                store_failure(self.uow, e, "PLACE_ORDER_LINE_FAILED", "Failed to place order line")
            )

    def _duplicate_error(self, command: PlaceOrderLineCommandDTO) -> Error:
        return Error(
            code="ORDER_LINE_EXISTS",
            message=f"Item {command.item_no} is already on order {command.order_no}",
            reason="Re-ordering the same item within an order is not allowed",
        )

    def _insufficient_error(self, command: PlaceOrderLineCommandDTO, available: int) -> Error:
        return insufficient_stock(command.item_no, command.quantity, available)
