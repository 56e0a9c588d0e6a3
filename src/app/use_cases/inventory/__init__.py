"""Inventory catalogue use cases"""
from .manage_items import (
    CreateInventoryItem,
    UpdateInventoryItem,
    GetInventoryItem,
    ListInventoryItems,
    DeleteInventoryItem,
)
from .dtos import (
    CreateInventoryItemCommandDTO,
    UpdateInventoryItemCommandDTO,
    InventoryItemResponseDTO,
)

__all__ = [
    "CreateInventoryItem",
    "UpdateInventoryItem",
    "GetInventoryItem",
    "ListInventoryItems",
    "DeleteInventoryItem",
    "CreateInventoryItemCommandDTO",
    "UpdateInventoryItemCommandDTO",
    "InventoryItemResponseDTO",
]
