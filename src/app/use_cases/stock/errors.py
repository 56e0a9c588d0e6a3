"""Errors shared by the stock ledger use cases"""

import logging
from libs.result import Error

logger = logging.getLogger(__name__)


def insufficient_stock(item_no: int, requested: int, available: int) -> Error:
    """INSUFFICIENT_STOCK carrying the quantity on hand in details.available"""
    logger.warning(f"Insufficient stock: item={item_no} requested={requested} available={available}")
    return Error(
        code="INSUFFICIENT_STOCK",
        message=f"Insufficient stock. Requested: {requested}, Available: {available}",
        reason=f"available={available}, requested={requested}",
        details={"available": available},
    )
