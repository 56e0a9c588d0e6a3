"""SQLAlchemy implementation of OrderLineRepository

Priced reads join lines to the current inventory price.
"""

from decimal import Decimal
from typing import List, Optional, Tuple
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.order_line_repository import OrderLineRepository
from src.domain.inventory_item import InventoryItem
from src.domain.order_line import OrderLine


class SqlAlchemyOrderLineRepository(OrderLineRepository):
    """
    SQLAlchemy implementation of OrderLineRepository

    Uniqueness of (order_no, item_no) is enforced by the composite primary key.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, order_no: int, item_no: int) -> Optional[OrderLine]:
        stmt = select(OrderLine).where(
            OrderLine.order_no == order_no,
            OrderLine.item_no == item_no,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_order(self, order_no: int) -> List[Tuple[OrderLine, str]]:
        stmt = (
            select(OrderLine, InventoryItem.name)
            .join(InventoryItem, OrderLine.item_no == InventoryItem.item_no)
            .where(OrderLine.order_no == order_no)
            .order_by(OrderLine.item_no)
        )
        result = await self.session.execute(stmt)
        return [(line, name) for line, name in result.all()]

    async def list_priced_lines(self, order_no: int) -> List[Tuple[Decimal, int]]:
        """
        Retrieve (price, quantity) pairs for an order

        Multiplication and summing happen in Python so that rounding is
        applied once, on the final total.
        """
        stmt = (
            select(InventoryItem.price, OrderLine.quantity)
            .join(InventoryItem, OrderLine.item_no == InventoryItem.item_no)
            .where(OrderLine.order_no == order_no)
        )
        result = await self.session.execute(stmt)
        return [(Decimal(price), quantity) for price, quantity in result.all()]

    async def create(self, line: OrderLine) -> OrderLine:
        self.session.add(line)
        await self.session.flush()
        await self.session.refresh(line)
        return line

    async def update(self, line: OrderLine) -> OrderLine:
        self.session.add(line)
        await self.session.flush()
        await self.session.refresh(line)
        return line

    async def delete(self, line: OrderLine) -> None:
        await self.session.delete(line)
        await self.session.flush()

    async def exists_for_item(self, item_no: int) -> bool:
        stmt = select(OrderLine.order_no).where(OrderLine.item_no == item_no).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None
