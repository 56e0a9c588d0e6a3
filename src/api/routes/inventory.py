"""Inventory API Routes

Catalogue maintenance. Stock levels change only through supplied items
and ordered items.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.inventory_request import CreateItemRequestSchema, UpdateItemRequestSchema
from src.app.use_cases.inventory.dtos import (
    CreateInventoryItemCommandDTO,
    UpdateInventoryItemCommandDTO,
    InventoryItemResponseDTO,
)
from src.app.use_cases.inventory.manage_items import (
    CreateInventoryItem,
    UpdateInventoryItem,
    GetInventoryItem,
    ListInventoryItems,
    DeleteInventoryItem,
)
from src.adapter.repositories.inventory_repository import SqlAlchemyInventoryRepository
from src.adapter.repositories.order_line_repository import SqlAlchemyOrderLineRepository
from src.adapter.repositories.supplied_item_repository import SqlAlchemySuppliedItemRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/inventory", tags=["Inventory"])


@router.post("", response_model=InventoryItemResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_item(
    request: CreateItemRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Add an item to the catalogue with its opening stock.

    **Returns:**
    - 201: Item created
    - 400: `ITEM_EXISTS` or `INVALID_INPUT`
    """
    command = CreateInventoryItemCommandDTO(**request.model_dump())
    use_case = CreateInventoryItem(SqlAlchemyUnitOfWork(session), SqlAlchemyInventoryRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=List[InventoryItemResponseDTO])
async def list_items(session: AsyncSession = Depends(get_session)):
    result = await ListInventoryItems(SqlAlchemyInventoryRepository(session)).execute()
    return result.value


@router.get("/{item_no}", response_model=InventoryItemResponseDTO)
async def get_item(item_no: int, session: AsyncSession = Depends(get_session)):
    result = await GetInventoryItem(SqlAlchemyInventoryRepository(session)).execute(item_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/{item_no}", response_model=InventoryItemResponseDTO)
async def update_item(
    item_no: int,
    request: UpdateItemRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Change name, category or price.

    A new price applies to every later order valuation; recorded
    payments keep their snapshot amount.
    """
    command = UpdateInventoryItemCommandDTO(item_no=item_no, **request.model_dump())
    use_case = UpdateInventoryItem(SqlAlchemyUnitOfWork(session), SqlAlchemyInventoryRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{item_no}", response_model=InventoryItemResponseDTO)
async def delete_item(item_no: int, session: AsyncSession = Depends(get_session)):
    """
    Remove an item that no order line or supplied item receipt references.

    **Returns:**
    - 200: Item removed
    - 400: `ITEM_IN_USE`
    - 404: `ITEM_NOT_FOUND`
    """
    use_case = DeleteInventoryItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInventoryRepository(session),
        SqlAlchemyOrderLineRepository(session),
        SqlAlchemySuppliedItemRepository(session),
    )
    result = await use_case.execute(item_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
