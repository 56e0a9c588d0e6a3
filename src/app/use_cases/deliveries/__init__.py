"""Delivery use cases"""
from .manage_deliveries import (
    RecordDelivery,
    UpdateDeliveryStatus,
    GetDelivery,
    ListDeliveries,
    DeleteDelivery,
)
from .dtos import (
    RecordDeliveryCommandDTO,
    UpdateDeliveryStatusCommandDTO,
    DeliveryResponseDTO,
)

__all__ = [
    "RecordDelivery",
    "UpdateDeliveryStatus",
    "GetDelivery",
    "ListDeliveries",
    "DeleteDelivery",
    "RecordDeliveryCommandDTO",
    "UpdateDeliveryStatusCommandDTO",
    "DeliveryResponseDTO",
]
