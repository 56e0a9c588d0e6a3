"""Supplied Items API Routes

Recording goods received adds them to inventory stock; correcting or
removing a receipt moves the same stock back.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.inventory_request import ReceiveSupplyRequestSchema, UpdateSupplyRequestSchema
from src.app.use_cases.stock.dtos import (
    ReceiveSupplyCommandDTO,
    UpdateSupplyCommandDTO,
    SupplyReceiptResponseDTO,
)
from src.app.use_cases.stock.receive_supply import ReceiveSupply
from src.app.use_cases.stock.revise_supply import UpdateSuppliedItem, DeleteSuppliedItem
from src.app.use_cases.stock.supplied_items import GetSuppliedItem, ListSuppliedItems
from src.adapter.repositories.inventory_repository import SqlAlchemyInventoryRepository
from src.adapter.repositories.supplied_item_repository import SqlAlchemySuppliedItemRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/supplied-items", tags=["Supplied Items"])


@router.post(
    "",
    response_model=SupplyReceiptResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {
            "description": "Inventory item not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ITEM_NOT_FOUND",
                            "message": "Inventory item 101 not found"
                        }
                    }
                }
            }
        },
        503: {"description": "Lock timeout or deadlock, retry the request"},
    }
)
async def receive_supply(
    request: ReceiveSupplyRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Record supplied stock and add it to the item's quantity.

    The receipt and the stock increment are committed together.

    **Returns:**
    - 201: Receipt recorded, `quantity_on_hand` is the new stock
    - 404: `ITEM_NOT_FOUND`
    - 503: `TRANSIENT_STORE_FAILURE`, safe to retry
    """
    uow = SqlAlchemyUnitOfWork(session)
    inventory_repo = SqlAlchemyInventoryRepository(session)
    supplied_item_repo = SqlAlchemySuppliedItemRepository(session)

    command = ReceiveSupplyCommandDTO(
        item_no=request.item_no,
        supplier_no=request.supplier_no,
        quantity=request.quantity,
        purchase_date=request.purchase_date,
    )

    use_case = ReceiveSupply(uow, inventory_repo, supplied_item_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=List[SupplyReceiptResponseDTO])
async def list_supplied_items(session: AsyncSession = Depends(get_session)):
    result = await ListSuppliedItems(SqlAlchemySuppliedItemRepository(session)).execute()
    return result.value


@router.get("/{serial_no}", response_model=SupplyReceiptResponseDTO)
async def get_supplied_item(
    serial_no: int,
    session: AsyncSession = Depends(get_session)
):
    result = await GetSuppliedItem(SqlAlchemySuppliedItemRepository(session)).execute(serial_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put(
    "/{serial_no}",
    response_model=SupplyReceiptResponseDTO,
    responses={
        400: {"description": "Correction would drive stock below zero"},
        404: {"description": "Receipt or inventory item not found"},
        503: {"description": "Lock timeout or deadlock, retry the request"},
    }
)
async def update_supplied_item(
    serial_no: int,
    request: UpdateSupplyRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Correct a receipt's item, supplier, quantity or date.

    The old quantity leaves the old item and the new quantity enters the
    new item in one transaction.

    **Returns:**
    - 200: Receipt corrected, `quantity_on_hand` is the new item's stock
    - 400: `INSUFFICIENT_STOCK` when received units were already ordered
    - 404: `RECEIPT_NOT_FOUND` or `ITEM_NOT_FOUND`
    - 503: `TRANSIENT_STORE_FAILURE`, safe to retry
    """
    command = UpdateSupplyCommandDTO(serial_no=serial_no, **request.model_dump())
    use_case = UpdateSuppliedItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInventoryRepository(session),
        SqlAlchemySuppliedItemRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{serial_no}", response_model=SupplyReceiptResponseDTO)
async def delete_supplied_item(
    serial_no: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Remove a receipt and take its units back out of stock.

    **Returns:**
    - 200: Receipt removed, `quantity_on_hand` is the remaining stock
    - 400: `INSUFFICIENT_STOCK` when received units were already ordered
    - 404: `RECEIPT_NOT_FOUND`
    """
    use_case = DeleteSuppliedItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInventoryRepository(session),
        SqlAlchemySuppliedItemRepository(session),
    )
    result = await use_case.execute(serial_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
