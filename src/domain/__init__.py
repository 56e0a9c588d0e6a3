from .base import BaseModel
from .inventory_item import InventoryItem
from .order import Order
from .order_line import OrderLine
from .payment import Payment, PaymentMethod
from .supplied_item import SuppliedItemReceipt
from .delivery import Delivery, DeliveryStatus, DeliveryState
from .valuation import order_total

__all__ = [
    "BaseModel",
    "InventoryItem",
    "Order",
    "OrderLine",
    "Payment",
    "PaymentMethod",
    "SuppliedItemReceipt",
    "Delivery",
    "DeliveryStatus",
    "DeliveryState",
    "order_total",
]
