"""ComputeOrderTotal Use Case

Values an order from its current lines and current inventory prices.
"""

from libs.result import Result, Return
from src.app.repositories.order_line_repository import OrderLineRepository
from src.domain.valuation import order_total
from .dtos import OrderTotalDTO


class ComputeOrderTotal:
    """
    Order Valuation

    Read-only: sums price * quantity over the order's lines.

    - An order with no lines is worth 0.00 (not an error)
    - Rounding is half-to-even on the final sum, not per line
    - Does not check that the order exists; callers that need to
      distinguish a missing order check it first
    """

    def __init__(self, order_line_repo: OrderLineRepository):
        self.order_line_repo = order_line_repo

    async def execute(self, order_no: int) -> Result[OrderTotalDTO]:
        priced_lines = await self.order_line_repo.list_priced_lines(order_no)
        return Return.ok(
            OrderTotalDTO(
                order_no=order_no,
                amount=order_total(priced_lines),
                line_count=len(priced_lines),
            )
        )
