"""Delivery Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.delivery import Delivery, DeliveryStatus


class DeliveryRepository(ABC):
    """
    Repository interface for Delivery and DeliveryStatus

    Both rows are always read and written as a pair.
    """

    @abstractmethod
    async def get_by_delivery_no(self, delivery_no: int) -> Optional[Tuple[Delivery, DeliveryStatus]]:
        pass

    @abstractmethod
    async def get_status(self, order_no: int) -> Optional[DeliveryStatus]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Tuple[Delivery, DeliveryStatus]]:
        pass

    @abstractmethod
    async def create(self, delivery: Delivery, status: DeliveryStatus) -> Tuple[Delivery, DeliveryStatus]:
        pass

    @abstractmethod
    async def update_status(self, status: DeliveryStatus) -> DeliveryStatus:
        pass

    @abstractmethod
    async def delete(self, delivery: Delivery, status: DeliveryStatus) -> None:
        """Remove the delivery and its status row in the current transaction"""
        pass
