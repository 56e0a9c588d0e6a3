"""Order valuation use cases"""
from .compute_order_total import ComputeOrderTotal
from .create_order import CreateOrder
from .update_order import UpdateOrder
from .get_order import GetOrder, ListOrders
from .delete_order import DeleteOrder
from .dtos import (
    CreateOrderCommandDTO,
    UpdateOrderCommandDTO,
    OrderTotalDTO,
    OrderResponseDTO,
)

__all__ = [
    "ComputeOrderTotal",
    "CreateOrder",
    "UpdateOrder",
    "GetOrder",
    "ListOrders",
    "DeleteOrder",
    "CreateOrderCommandDTO",
    "UpdateOrderCommandDTO",
    "OrderTotalDTO",
    "OrderResponseDTO",
]
