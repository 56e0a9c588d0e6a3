"""Order Line Repository Interface

Defines the contract for order line persistence and priced line reads
used by order valuation.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Tuple
from src.domain.order_line import OrderLine


class OrderLineRepository(ABC):
    """
    Repository interface for OrderLine persistence

    Lines are keyed by (order_no, item_no).
    """

    @abstractmethod
    async def get(self, order_no: int, item_no: int) -> Optional[OrderLine]:
        """
        Retrieve a single line

        Args:
            order_no: Order number
            item_no: Item number

        Returns:
            OrderLine if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_order(self, order_no: int) -> List[Tuple[OrderLine, str]]:
        """
        Retrieve all lines of an order with the item name

        Returns:
            List of (OrderLine, item name) pairs
        """
        pass

    @abstractmethod
    async def list_priced_lines(self, order_no: int) -> List[Tuple[Decimal, int]]:
        """
        Retrieve (current unit price, ordered quantity) for each line of an order

        Args:
            order_no: Order number

        Returns:
            Empty list when the order has no lines
        """
        pass

    @abstractmethod
    async def create(self, line: OrderLine) -> OrderLine:
        """
        Raises:
            IntegrityError: If the (order_no, item_no) pair already exists
        """
        pass

    @abstractmethod
    async def update(self, line: OrderLine) -> OrderLine:
        """Persist a changed quantity; the caller applies the stock delta"""
        pass

    @abstractmethod
    async def delete(self, line: OrderLine) -> None:
        pass

    @abstractmethod
    async def exists_for_item(self, item_no: int) -> bool:
        """True if any order holds a line for the item"""
        pass
