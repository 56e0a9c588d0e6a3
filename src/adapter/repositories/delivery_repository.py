"""SQLAlchemy implementation of DeliveryRepository"""

from typing import List, Optional, Tuple
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.delivery_repository import DeliveryRepository
from src.domain.delivery import Delivery, DeliveryStatus


class SqlAlchemyDeliveryRepository(DeliveryRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_delivery_no(self, delivery_no: int) -> Optional[Tuple[Delivery, DeliveryStatus]]:
        stmt = (
            select(Delivery, DeliveryStatus)
            .join(DeliveryStatus, Delivery.order_no == DeliveryStatus.order_no)
            .where(Delivery.delivery_no == delivery_no)
        )
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    async def get_status(self, order_no: int) -> Optional[DeliveryStatus]:
        stmt = select(DeliveryStatus).where(DeliveryStatus.order_no == order_no)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Tuple[Delivery, DeliveryStatus]]:
        stmt = (
            select(Delivery, DeliveryStatus)
            .join(DeliveryStatus, Delivery.order_no == DeliveryStatus.order_no)
            .order_by(Delivery.delivery_no)
        )
        result = await self.session.execute(stmt)
        return [(delivery, status) for delivery, status in result.all()]

    async def create(self, delivery: Delivery, status: DeliveryStatus) -> Tuple[Delivery, DeliveryStatus]:
        """
        Insert the delivery and its status row in the current transaction

        Note:
            Commit belongs to the unit of work; a failure on either insert
            leaves nothing behind after rollback.
        """
        self.session.add(delivery)
        self.session.add(status)
        await self.session.flush()
        await self.session.refresh(delivery)
        await self.session.refresh(status)
        return delivery, status

    async def update_status(self, status: DeliveryStatus) -> DeliveryStatus:
        self.session.add(status)
        await self.session.flush()
        await self.session.refresh(status)
        return status

    async def delete(self, delivery: Delivery, status: DeliveryStatus) -> None:
        await self.session.delete(status)
        await self.session.delete(delivery)
        await self.session.flush()
