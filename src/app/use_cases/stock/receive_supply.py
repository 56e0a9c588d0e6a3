"""ReceiveSupply Use Case

Records goods received from a supplier and adds them to stock
in a single transaction.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.inventory_repository import InventoryRepository
from src.app.repositories.supplied_item_repository import SuppliedItemRepository
from src.app.use_cases.failures import store_failure
from src.domain.supplied_item import SuppliedItemReceipt
from .dtos import ReceiveSupplyCommandDTO, SupplyReceiptResponseDTO

logger = logging.getLogger(__name__)


class ReceiveSupply:
    """
    Use Case: Receive supplied stock

    Business Rules:
    1. quantity must be positive
    2. Item must exist
    3. Atomic updates: receipt insert and stock increment commit together
    4. Pessimistic locking: item row locked while stock changes
    5. No upper bound on resulting quantity

    Flow:
    1. Validate quantity
    2. Get item with lock (SELECT FOR UPDATE)
    3. Insert receipt
    4. Increment item quantity
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        inventory_repo: InventoryRepository,
        supplied_item_repo: SuppliedItemRepository,
    ):
        self.uow = uow
        self.inventory_repo = inventory_repo
        self.supplied_item_repo = supplied_item_repo

    async def execute(self, command: ReceiveSupplyCommandDTO) -> Result[SupplyReceiptResponseDTO]:
        """
        Execute supply receipt

        Args:
            command: ReceiveSupplyCommandDTO with item_no, supplier_no, quantity, purchase_date

        Returns:
            Result[SupplyReceiptResponseDTO]: Receipt with stock after the increment, or error
        """
        if command.quantity <= 0:
            return Return.err(
                Error(
                    code="INVALID_INPUT",
                    message="Received quantity must be greater than 0",
                    reason=f"quantity={command.quantity}",
                )
            )

        try:
            item = await self.inventory_repo.get_by_item_no(command.item_no, for_update=True)
            if not item:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ITEM_NOT_FOUND",
                        message=f"Inventory item {command.item_no} not found",
                    )
                )

            receipt = await self.supplied_item_repo.create(
                SuppliedItemReceipt(
                    item_no=command.item_no,
                    supplier_no=command.supplier_no,
                    quantity=command.quantity,
                    purchase_date=command.purchase_date,
                )
            )

            updated_item = await self.inventory_repo.increment_quantity(command.item_no, command.quantity)

            await self.uow.commit()

            logger.info(
                f"Supply received: item={command.item_no} qty=+{command.quantity} "
                f"on_hand={updated_item.quantity} serial={receipt.serial_no}"
            )

            return Return.ok(
                SupplyReceiptResponseDTO(
                    serial_no=receipt.serial_no,
                    item_no=receipt.item_no,
                    item_name=updated_item.name,
                    supplier_no=receipt.supplier_no,
                    quantity=receipt.quantity,
                    purchase_date=receipt.purchase_date,
                    quantity_on_hand=updated_item.quantity,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Supply receipt failed for item {command.item_no}: {e}")
            return Return.err(
                store_failure(self.uow, e, "RECEIVE_SUPPLY_FAILED", "Failed to record supplied item")
            )
