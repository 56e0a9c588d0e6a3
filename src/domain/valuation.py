"""Order valuation arithmetic

Pure functions shared by order reads and payment snapshots.
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable, Tuple

CENT = Decimal("0.01")


def order_total(priced_lines: Iterable[Tuple[Decimal, int]]) -> Decimal:
    """
    Sum price * quantity over an order's lines

    Lines are multiplied exactly and only the final sum is rounded
    (half-to-even, two fractional digits). No lines gives 0.00.

    Args:
        priced_lines: (unit price, ordered quantity) pairs

    Returns:
        Non-negative total with currency precision
    """
    total = sum((Decimal(price) * quantity for price, quantity in priced_lines), Decimal("0"))
    return total.quantize(CENT, rounding=ROUND_HALF_EVEN)
