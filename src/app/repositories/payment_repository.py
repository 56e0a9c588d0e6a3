"""Payment Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.payment import Payment


class PaymentRepository(ABC):
    """
    Repository interface for Payment persistence

    The stored amount is a snapshot written by the payment use cases.
    """

    @abstractmethod
    async def get_by_payment_no(self, payment_no: int) -> Optional[Payment]:
        pass

    @abstractmethod
    async def exists_for_order(self, order_no: int) -> bool:
        pass

    @abstractmethod
    async def list_all(self) -> List[Payment]:
        pass

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def update(self, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def delete(self, payment: Payment) -> None:
        pass
