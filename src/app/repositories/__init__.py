from .inventory_repository import InventoryRepository
from .order_repository import OrderRepository
from .order_line_repository import OrderLineRepository
from .payment_repository import PaymentRepository
from .supplied_item_repository import SuppliedItemRepository
from .delivery_repository import DeliveryRepository

__all__ = [
    "InventoryRepository",
    "OrderRepository",
    "OrderLineRepository",
    "PaymentRepository",
    "SuppliedItemRepository",
    "DeliveryRepository",
]
