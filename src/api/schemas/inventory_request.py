"""Request schemas for Inventory and Stock API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class CreateItemRequestSchema(BaseModel):
    """
    Request schema for adding an inventory item

    Used for POST /inventory endpoint.
    """

    item_no: int = Field(..., gt=0, description="Item number (required, positive)")
    name: str = Field(..., min_length=1, max_length=100, description="Item name")
    category: Optional[str] = Field(default=None, max_length=50, description="Item category")
    price: Decimal = Field(..., ge=0, description="Unit price (must be >= 0)")
    quantity: int = Field(default=0, ge=0, description="Opening stock (must be >= 0)")

    @field_validator('price')
    @classmethod
    def validate_price(cls, v):
        """Prices are stored with two fractional digits"""
        if v.as_tuple().exponent < -2:
            raise ValueError("Price must have at most 2 decimal places")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "item_no": 101,
                "name": "Basmati Rice 5kg",
                "category": "Grocery",
                "price": "10.00",
                "quantity": 40
            }
        }


class UpdateItemRequestSchema(BaseModel):
    """
    Request schema for PUT /inventory/{item_no}

    Stock is not editable here; use supplied items and ordered items.
    """

    name: str = Field(..., min_length=1, max_length=100, description="Item name")
    category: Optional[str] = Field(default=None, max_length=50, description="Item category")
    price: Decimal = Field(..., ge=0, description="Unit price (must be >= 0)")

    @field_validator('price')
    @classmethod
    def validate_price(cls, v):
        if v.as_tuple().exponent < -2:
            raise ValueError("Price must have at most 2 decimal places")
        return v


class ReceiveSupplyRequestSchema(BaseModel):
    """
    Request schema for recording supplied stock

    Used for POST /supplied-items endpoint.
    """

    item_no: int = Field(..., gt=0, description="Inventory item number")
    supplier_no: int = Field(..., gt=0, description="Supplier reference")
    quantity: int = Field(..., gt=0, description="Units received (must be > 0)")
    purchase_date: date = Field(..., description="Purchase date")

    class Config:
        json_schema_extra = {
            "example": {
                "item_no": 101,
                "supplier_no": 7,
                "quantity": 20,
                "purchase_date": "2024-03-01"
            }
        }


class UpdateSupplyRequestSchema(ReceiveSupplyRequestSchema):
    """
    Request schema for PUT /supplied-items/{serial_no}

    Same fields as a new receipt; the stock of the old and new item is
    corrected together.
    """
