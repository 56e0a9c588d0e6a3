"""Supplied Item read Use Cases"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.supplied_item_repository import SuppliedItemRepository
from src.domain.supplied_item import SuppliedItemReceipt
from .dtos import SupplyReceiptResponseDTO


def _to_response_dto(receipt: SuppliedItemReceipt, item_name: str) -> SupplyReceiptResponseDTO:
    return SupplyReceiptResponseDTO(
        serial_no=receipt.serial_no,
        item_no=receipt.item_no,
        item_name=item_name,
        supplier_no=receipt.supplier_no,
        quantity=receipt.quantity,
        purchase_date=receipt.purchase_date,
    )


class GetSuppliedItem:
    def __init__(self, supplied_item_repo: SuppliedItemRepository):
        self.supplied_item_repo = supplied_item_repo

    async def execute(self, serial_no: int) -> Result[SupplyReceiptResponseDTO]:
        row = await self.supplied_item_repo.get_by_serial_no(serial_no)
        if not row:
            return Return.err(
                Error(
                    code="RECEIPT_NOT_FOUND",
                    message=f"Supplied item record {serial_no} not found",
                )
            )
        return Return.ok(_to_response_dto(*row))


class ListSuppliedItems:
    def __init__(self, supplied_item_repo: SuppliedItemRepository):
        self.supplied_item_repo = supplied_item_repo

    async def execute(self) -> Result[List[SupplyReceiptResponseDTO]]:
        rows = await self.supplied_item_repo.list_all()
        return Return.ok([_to_response_dto(receipt, name) for receipt, name in rows])
