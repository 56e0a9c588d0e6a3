"""SQLAlchemy implementation of InventoryRepository

Provides persistence for InventoryItem entities with pessimistic locking
and single-statement stock movements.
"""

from typing import List, Optional
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.inventory_repository import InventoryRepository
from src.domain.inventory_item import InventoryItem
from src.domain.base import utc_now


class SqlAlchemyInventoryRepository(InventoryRepository):
    """
    SQLAlchemy implementation of InventoryRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Conditional UPDATE for bounded decrements (no read-modify-write)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_item_no(self, item_no: int, for_update: bool = False) -> Optional[InventoryItem]:
        """
        Retrieve item by item number with optional row-level locking

        Args:
            item_no: Item number
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            InventoryItem if found, None otherwise
        """
        stmt = select(InventoryItem).where(InventoryItem.item_no == item_no)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[InventoryItem]:
        stmt = select(InventoryItem).order_by(InventoryItem.item_no)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, item: InventoryItem) -> InventoryItem:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def update(self, item: InventoryItem) -> InventoryItem:
        item.updated_at = utc_now()
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete(self, item: InventoryItem) -> None:
        await self.session.delete(item)
        await self.session.flush()

    async def increment_quantity(self, item_no: int, amount: int) -> InventoryItem:
        """
        Add stock in place (quantity = quantity + amount)

        Note:
            Should be called within a transaction with the item already locked
        """
        stmt = (
            update(InventoryItem)
            .where(InventoryItem.item_no == item_no)
            .values(quantity=InventoryItem.quantity + amount, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        return await self._reload(item_no)

    async def decrement_quantity(self, item_no: int, amount: int) -> Optional[InventoryItem]:
        """
        Remove stock only when quantity >= amount

        The guard lives in the WHERE clause, so two concurrent decrements
        cannot both pass against the same units even without a row lock.

        Returns:
            The reloaded item, or None if stock was insufficient
        """
        stmt = (
            update(InventoryItem)
            .where(InventoryItem.item_no == item_no)
            .where(InventoryItem.quantity >= amount)
            .values(quantity=InventoryItem.quantity - amount, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return None
        return await self._reload(item_no)

    async def _reload(self, item_no: int) -> InventoryItem:
        # Bulk UPDATE bypasses the identity map; refresh the cached instance
        stmt = (
            select(InventoryItem)
            .where(InventoryItem.item_no == item_no)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
