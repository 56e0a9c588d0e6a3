"""Supplied Item Repository Interface

Receipts can be corrected or removed; the use cases move the matching
stock in the same transaction.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.supplied_item import SuppliedItemReceipt


class SuppliedItemRepository(ABC):
    """Repository interface for SuppliedItemReceipt persistence"""

    @abstractmethod
    async def create(self, receipt: SuppliedItemReceipt) -> SuppliedItemReceipt:
        """
        Create a new receipt

        Args:
            receipt: SuppliedItemReceipt to persist

        Returns:
            Created receipt with generated serial_no
        """
        pass

    @abstractmethod
    async def get(self, serial_no: int, for_update: bool = False) -> Optional[SuppliedItemReceipt]:
        """
        Retrieve a receipt without its item name

        Args:
            serial_no: Receipt serial number
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            SuppliedItemReceipt if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_serial_no(self, serial_no: int) -> Optional[Tuple[SuppliedItemReceipt, str]]:
        """Retrieve a receipt with the item name, None if missing"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Tuple[SuppliedItemReceipt, str]]:
        """Retrieve all receipts with their item names"""
        pass

    @abstractmethod
    async def update(self, receipt: SuppliedItemReceipt) -> SuppliedItemReceipt:
        pass

    @abstractmethod
    async def delete(self, receipt: SuppliedItemReceipt) -> None:
        pass

    @abstractmethod
    async def exists_for_item(self, item_no: int) -> bool:
        """True if any receipt references the item"""
        pass
