"""SQLAlchemy implementation of PaymentRepository"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.payment import Payment
from src.domain.base import utc_now


class SqlAlchemyPaymentRepository(PaymentRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_payment_no(self, payment_no: int) -> Optional[Payment]:
        stmt = select(Payment).where(Payment.payment_no == payment_no)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_for_order(self, order_no: int) -> bool:
        stmt = select(Payment.payment_no).where(Payment.order_no == order_no).limit(1)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def list_all(self) -> List[Payment]:
        stmt = select(Payment).order_by(Payment.payment_no)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def update(self, payment: Payment) -> Payment:
        payment.updated_at = utc_now()
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def delete(self, payment: Payment) -> None:
        await self.session.delete(payment)
        await self.session.flush()
