"""SQLAlchemy implementation of SuppliedItemRepository"""

from typing import List, Optional, Tuple
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.supplied_item_repository import SuppliedItemRepository
from src.domain.inventory_item import InventoryItem
from src.domain.supplied_item import SuppliedItemReceipt


class SqlAlchemySuppliedItemRepository(SuppliedItemRepository):
    """
    SQLAlchemy implementation of SuppliedItemRepository

    Reads join the inventory table for the item name.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, receipt: SuppliedItemReceipt) -> SuppliedItemReceipt:
        self.session.add(receipt)
        await self.session.flush()
        await self.session.refresh(receipt)
        return receipt

    async def get(self, serial_no: int, for_update: bool = False) -> Optional[SuppliedItemReceipt]:
        stmt = select(SuppliedItemReceipt).where(SuppliedItemReceipt.serial_no == serial_no)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_serial_no(self, serial_no: int) -> Optional[Tuple[SuppliedItemReceipt, str]]:
        stmt = (
            select(SuppliedItemReceipt, InventoryItem.name)
            .join(InventoryItem, SuppliedItemReceipt.item_no == InventoryItem.item_no)
            .where(SuppliedItemReceipt.serial_no == serial_no)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    async def list_all(self) -> List[Tuple[SuppliedItemReceipt, str]]:
        stmt = (
            select(SuppliedItemReceipt, InventoryItem.name)
            .join(InventoryItem, SuppliedItemReceipt.item_no == InventoryItem.item_no)
            .order_by(SuppliedItemReceipt.serial_no)
        )
        result = await self.session.execute(stmt)
        return [(receipt, name) for receipt, name in result.all()]

    async def update(self, receipt: SuppliedItemReceipt) -> SuppliedItemReceipt:
        self.session.add(receipt)
        await self.session.flush()
        await self.session.refresh(receipt)
        return receipt

    async def delete(self, receipt: SuppliedItemReceipt) -> None:
        await self.session.delete(receipt)
        await self.session.flush()

    async def exists_for_item(self, item_no: int) -> bool:
        stmt = select(SuppliedItemReceipt.serial_no).where(SuppliedItemReceipt.item_no == item_no).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None
