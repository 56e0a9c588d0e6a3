"""Supplied item correction Use Cases

Editing or removing a receipt reverses the stock it added. Units that
have already been ordered cannot be taken back, so a correction that
would drive stock below zero is rejected with INSUFFICIENT_STOCK.
"""

import logging
from typing import Optional, Tuple
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.inventory_repository import InventoryRepository
from src.app.repositories.supplied_item_repository import SuppliedItemRepository
from src.app.use_cases.failures import store_failure
from src.app.use_cases.stock.errors import insufficient_stock
from src.domain.inventory_item import InventoryItem
from .dtos import UpdateSupplyCommandDTO, SupplyReceiptResponseDTO

logger = logging.getLogger(__name__)


def _receipt_not_found(serial_no: int) -> Error:
    return Error(code="RECEIPT_NOT_FOUND", message=f"Supplied item receipt {serial_no} not found")


async def _take_back(
    uow: UnitOfWork,
    inventory_repo: InventoryRepository,
    item: InventoryItem,
    amount: int,
) -> Tuple[Optional[InventoryItem], Optional[Error]]:
    """
    Remove previously received units from a locked item

    Returns:
        (updated item, None) on success, (None, INSUFFICIENT_STOCK) after rollback
    """
    # Rollback expires loaded rows; read them first
    item_no = item.item_no
    available = item.quantity
    if available < amount:
        await uow.rollback()
        return None, insufficient_stock(item_no, amount, available)

    updated_item = await inventory_repo.decrement_quantity(item_no, amount)
    if updated_item is None:
        await uow.rollback()
        current = await inventory_repo.get_by_item_no(item_no)
        return None, insufficient_stock(item_no, amount, current.quantity if current else 0)
    return updated_item, None


class UpdateSuppliedItem:
    """
    Use Case: Correct a supplied item receipt

    Business Rules:
    1. quantity must be positive
    2. Receipt and new item must exist
    3. The old quantity leaves the old item, the new quantity enters the new item
    4. No stock level may go below zero
    5. Atomic updates: receipt update and both stock movements commit together

    Flow:
    1. Validate quantity
    2. Get receipt with lock
    3. Lock affected items in item_no order
    4. Move stock (same item: net difference only)
    5. Update receipt
    6. Commit transaction
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

    async def execute(self, command: UpdateSupplyCommandDTO) -> Result[SupplyReceiptResponseDTO]:
        """
        Errors:
            INVALID_INPUT, RECEIPT_NOT_FOUND, ITEM_NOT_FOUND,
            INSUFFICIENT_STOCK (details.available), TRANSIENT_STORE_FAILURE
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
            receipt = await self.supplied_item_repo.get(command.serial_no, for_update=True)
            if not receipt:
                await self.uow.rollback()
                return Return.err(_receipt_not_found(command.serial_no))

            old_item_no = receipt.item_no
            old_quantity = receipt.quantity

            # Items are always locked in ascending item_no order
            items = {}
            for item_no in sorted({old_item_no, command.item_no}):
                items[item_no] = await self.inventory_repo.get_by_item_no(item_no, for_update=True)

            if items[command.item_no] is None:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ITEM_NOT_FOUND",
                        message=f"Inventory item {command.item_no} not found",
                    )
                )

            if old_item_no == command.item_no:
                delta = command.quantity - old_quantity
                if delta < 0:
                    updated_item, error = await _take_back(
                        self.uow, self.inventory_repo, items[old_item_no], -delta
                    )
                    if error:
                        return Return.err(error)
                elif delta > 0:
                    updated_item = await self.inventory_repo.increment_quantity(command.item_no, delta)
                else:
                    updated_item = items[command.item_no]
            else:
                _, error = await _take_back(self.uow, self.inventory_repo, items[old_item_no], old_quantity)
                if error:
                    return Return.err(error)
                updated_item = await self.inventory_repo.increment_quantity(command.item_no, command.quantity)

            receipt.item_no = command.item_no
            receipt.supplier_no = command.supplier_no
            receipt.quantity = command.quantity
            receipt.purchase_date = command.purchase_date
            receipt = await self.supplied_item_repo.update(receipt)

            await self.uow.commit()

            logger.info(
                f"Supply corrected: serial={receipt.serial_no} item={old_item_no}->{command.item_no} "
                f"qty={old_quantity}->{command.quantity} on_hand={updated_item.quantity}"
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
            logger.error(f"Supply correction failed for receipt {command.serial_no}: {e}")
            return Return.err(
                store_failure(self.uow, e, "UPDATE_SUPPLIED_ITEM_FAILED", "Failed to update supplied item")
            )


class DeleteSuppliedItem:
    """
    Use Case: Remove a supplied item receipt

    The received units leave stock in the same transaction; the receipt
    stays if they have already been ordered.
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

    async def execute(self, serial_no: int) -> Result[SupplyReceiptResponseDTO]:
        try:
            receipt = await self.supplied_item_repo.get(serial_no, for_update=True)
            if not receipt:
                await self.uow.rollback()
                return Return.err(_receipt_not_found(serial_no))

            item = await self.inventory_repo.get_by_item_no(receipt.item_no, for_update=True)
            updated_item, error = await _take_back(self.uow, self.inventory_repo, item, receipt.quantity)
            if error:
                return Return.err(error)

            response = SupplyReceiptResponseDTO(
                serial_no=receipt.serial_no,
                item_no=receipt.item_no,
                item_name=updated_item.name,
                supplier_no=receipt.supplier_no,
                quantity=receipt.quantity,
                purchase_date=receipt.purchase_date,
                quantity_on_hand=updated_item.quantity,
            )

            await self.supplied_item_repo.delete(receipt)
            await self.uow.commit()

            logger.info(
                f"Supply removed: serial={serial_no} item={response.item_no} "
                f"qty=-{response.quantity} on_hand={updated_item.quantity}"
            )

            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Supply removal failed for receipt {serial_no}: {e}")
            return Return.err(
                store_failure(self.uow, e, "DELETE_SUPPLIED_ITEM_FAILED", "Failed to delete supplied item")
            )
