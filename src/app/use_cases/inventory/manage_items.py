"""Inventory catalogue Use Cases

Create, update, read and delete inventory items. Quantity is set once at creation;
later stock movements belong to the stock ledger use cases.
"""

from decimal import Decimal
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.inventory_repository import InventoryRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from src.app.repositories.supplied_item_repository import SuppliedItemRepository
from src.app.use_cases.failures import store_failure
from src.domain.inventory_item import InventoryItem
from .dtos import (
    CreateInventoryItemCommandDTO,
    UpdateInventoryItemCommandDTO,
    InventoryItemResponseDTO,
)


def _to_response_dto(item: InventoryItem) -> InventoryItemResponseDTO:
    return InventoryItemResponseDTO(
        item_no=item.item_no,
        name=item.name,
        category=item.category,
        price=item.price,
        quantity=item.quantity,
        updated_at=item.updated_at,
    )


def _validate_price(price: Decimal) -> Optional[Error]:
    if price < 0:
        return Error(
            code="INVALID_INPUT",
            message="Price must not be negative",
            reason=f"price={price}",
        )
    return None


def _not_found(item_no: int) -> Error:
    return Error(code="ITEM_NOT_FOUND", message=f"Inventory item {item_no} not found")


class CreateInventoryItem:
    def __init__(self, uow: UnitOfWork, inventory_repo: InventoryRepository):
        self.uow = uow
        self.inventory_repo = inventory_repo

    async def execute(self, command: CreateInventoryItemCommandDTO) -> Result[InventoryItemResponseDTO]:
        error = _validate_price(command.price)
        if error:
            return Return.err(error)
        if command.quantity < 0:
            return Return.err(
                Error(
                    code="INVALID_INPUT",
                    message="Opening quantity must not be negative",
                    reason=f"quantity={command.quantity}",
                )
            )

        try:
            existing = await self.inventory_repo.get_by_item_no(command.item_no)
            if existing:
                return Return.err(
                    Error(code="ITEM_EXISTS", message=f"Inventory item {command.item_no} already exists")
                )

            item = await self.inventory_repo.create(
                InventoryItem(
                    item_no=command.item_no,
                    name=command.name,
                    category=command.category,
                    price=command.price,
                    quantity=command.quantity,
                )
            )
            await self.uow.commit()
            return Return.ok(_to_response_dto(item))

        except Exception as e:
            await self.uow.rollback()
            if self.uow.is_unique_violation(e):
                return Return.err(
                    Error(code="ITEM_EXISTS", message=f"Inventory item {command.item_no} already exists")
                )
            return Return.err(store_failure(self.uow, e, "CREATE_ITEM_FAILED", "Failed to add inventory item"))


class UpdateInventoryItem:
    """
    Use Case: Change name, category or price

    Price changes affect every later order valuation but not stored
    payment snapshots.
    """

    def __init__(self, uow: UnitOfWork, inventory_repo: InventoryRepository):
        self.uow = uow
        self.inventory_repo = inventory_repo

    async def execute(self, command: UpdateInventoryItemCommandDTO) -> Result[InventoryItemResponseDTO]:
        error = _validate_price(command.price)
        if error:
            return Return.err(error)

        try:
            item = await self.inventory_repo.get_by_item_no(command.item_no, for_update=True)
            if not item:
                await self.uow.rollback()
                return Return.err(_not_found(command.item_no))

            item.name = command.name
            item.category = command.category
            item.price = command.price
            item = await self.inventory_repo.update(item)
            await self.uow.commit()
            return Return.ok(_to_response_dto(item))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(store_failure(self.uow, e, "UPDATE_ITEM_FAILED", "Failed to update inventory item"))


class GetInventoryItem:
    def __init__(self, inventory_repo: InventoryRepository):
        self.inventory_repo = inventory_repo

    async def execute(self, item_no: int) -> Result[InventoryItemResponseDTO]:
        item = await self.inventory_repo.get_by_item_no(item_no)
        if not item:
            return Return.err(_not_found(item_no))
        return Return.ok(_to_response_dto(item))


class ListInventoryItems:
    def __init__(self, inventory_repo: InventoryRepository):
        self.inventory_repo = inventory_repo

    async def execute(self) -> Result[List[InventoryItemResponseDTO]]:
        items = await self.inventory_repo.list_all()
        return Return.ok([_to_response_dto(item) for item in items])


class DeleteInventoryItem:
    """
    Use Case: Remove an item from the catalogue

    Items referenced by an order line or a supplied item receipt are kept
    (ITEM_IN_USE).
    """

    def __init__(
        self,
        uow: UnitOfWork,
        inventory_repo: InventoryRepository,
        order_line_repo: OrderLineRepository,
        supplied_item_repo: SuppliedItemRepository,
    ):
        self.uow = uow
        self.inventory_repo = inventory_repo
        self.order_line_repo = order_line_repo
        self.supplied_item_repo = supplied_item_repo

    async def execute(self, item_no: int) -> Result[InventoryItemResponseDTO]:
        try:
            item = await self.inventory_repo.get_by_item_no(item_no, for_update=True)
            if not item:
                await self.uow.rollback()
                return Return.err(_not_found(item_no))

            for referenced_by, repo in (
                ("order line", self.order_line_repo),
                ("supplied item receipt", self.supplied_item_repo),
            ):
                if await repo.exists_for_item(item_no):
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            code="ITEM_IN_USE",
                            message=f"Inventory item {item_no} is still referenced and cannot be deleted",
                            reason=f"referenced_by={referenced_by}",
                        )
                    )

            response = _to_response_dto(item)
            await self.inventory_repo.delete(item)
            await self.uow.commit()
            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(store_failure(self.uow, e, "DELETE_ITEM_FAILED", "Failed to delete inventory item"))
