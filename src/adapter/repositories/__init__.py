from .inventory_repository import SqlAlchemyInventoryRepository
from .order_repository import SqlAlchemyOrderRepository
from .order_line_repository import SqlAlchemyOrderLineRepository
from .payment_repository import SqlAlchemyPaymentRepository
from .supplied_item_repository import SqlAlchemySuppliedItemRepository
from .delivery_repository import SqlAlchemyDeliveryRepository

__all__ = [
    "SqlAlchemyInventoryRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyOrderLineRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemySuppliedItemRepository",
    "SqlAlchemyDeliveryRepository",
]
