"""Data Transfer Objects for Inventory Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class CreateInventoryItemCommandDTO(BaseModel):
    """
    Command DTO for adding a catalogue item

    quantity is the opening stock; afterwards it only moves through
    supply receipts and order lines.
    """

    item_no: int = Field(..., description="Item number (client assigned)")
    name: str = Field(..., description="Item name")
    category: Optional[str] = Field(default=None, description="Item category")
    price: Decimal = Field(..., description="Unit price (must be >= 0)")
    quantity: int = Field(default=0, description="Opening stock (must be >= 0)")


class UpdateInventoryItemCommandDTO(BaseModel):
    """Command DTO for catalogue changes; stock is not editable here"""

    item_no: int = Field(..., description="Item number")
    name: str = Field(..., description="Item name")
    category: Optional[str] = Field(default=None, description="Item category")
    price: Decimal = Field(..., description="Unit price (must be >= 0)")


class InventoryItemResponseDTO(BaseModel):
    item_no: int = Field(..., description="Item number")
    name: str = Field(..., description="Item name")
    category: Optional[str] = Field(default=None, description="Item category")
    price: Decimal = Field(..., description="Unit price")
    quantity: int = Field(..., description="Quantity on hand")
    updated_at: datetime = Field(..., description="Last change")

    class Config:
        json_schema_extra = {
            "example": {
                "item_no": 101,
                "name": "Basmati Rice 5kg",
                "category": "Grocery",
                "price": "10.00",
                "quantity": 40,
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
