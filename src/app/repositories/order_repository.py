"""Order Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.order import Order


class OrderRepository(ABC):
    """Repository interface for Order headers"""

    @abstractmethod
    async def get_by_order_no(self, order_no: int, for_update: bool = False) -> Optional[Order]:
        """
        Args:
            order_no: Order number
            for_update: If True, lock the header so no line can be added concurrently
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Order]:
        pass

    @abstractmethod
    async def create(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def delete(self, order: Order) -> None:
        pass
