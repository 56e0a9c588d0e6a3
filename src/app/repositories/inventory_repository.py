"""Inventory Repository Interface

Defines the contract for inventory item persistence and stock movements.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.inventory_item import InventoryItem


class InventoryRepository(ABC):
    """
    Repository interface for InventoryItem persistence

    Stock movements are expressed as increments and bounded decrements
    so that the store can apply them atomically.
    """

    @abstractmethod
    async def get_by_item_no(self, item_no: int, for_update: bool = False) -> Optional[InventoryItem]:
        """
        Retrieve item by item number

        Args:
            item_no: Item number
            for_update: If True, lock the row with SELECT FOR UPDATE (pessimistic lock)

        Returns:
            InventoryItem if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[InventoryItem]:
        pass

    @abstractmethod
    async def create(self, item: InventoryItem) -> InventoryItem:
        pass

    @abstractmethod
    async def update(self, item: InventoryItem) -> InventoryItem:
        """Persist catalogue changes (name, category, price)"""
        pass

    @abstractmethod
    async def increment_quantity(self, item_no: int, amount: int) -> InventoryItem:
        """
        Add stock to an item

        Args:
            item_no: Item number
            amount: Units received (> 0)

        Returns:
            The item with its new quantity
        """
        pass

    @abstractmethod
    async def decrement_quantity(self, item_no: int, amount: int) -> Optional[InventoryItem]:
        """
        Remove stock only if enough is on hand

        Equivalent to "decrement by amount if quantity >= amount" as one
        atomic statement.

        Args:
            item_no: Item number
            amount: Units to remove (> 0)

        Returns:
            The item with its new quantity, or None if stock was insufficient
        """
        pass

    @abstractmethod
    async def delete(self, item: InventoryItem) -> None:
        """Remove an item no order line or receipt references"""
        pass
