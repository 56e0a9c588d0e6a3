"""Request schemas for Order and Ordered Item API"""

from datetime import date
from pydantic import BaseModel, Field


class CreateOrderRequestSchema(BaseModel):
    """
    Request schema for creating an order

    Used for POST /orders endpoint.
    """

    order_no: int = Field(..., gt=0, description="Order number (required, positive)")
    order_date: date = Field(..., description="Order date")
    customer_no: int = Field(..., gt=0, description="Customer reference")
    address: str = Field(..., min_length=1, max_length=255, description="Delivery address")

    class Config:
        json_schema_extra = {
            "example": {
                "order_no": 5001,
                "order_date": "2024-03-02",
                "customer_no": 12,
                "address": "14 Canal Road, Lahore"
            }
        }


class UpdateOrderRequestSchema(BaseModel):
    order_date: date = Field(..., description="Order date")
    customer_no: int = Field(..., gt=0, description="Customer reference")
    address: str = Field(..., min_length=1, max_length=255, description="Delivery address")


class PlaceOrderLineRequestSchema(BaseModel):
    """
    Request schema for adding an item to an order

    Used for POST /ordered-items endpoint.
    """

    order_no: int = Field(..., gt=0, description="Order number")
    item_no: int = Field(..., gt=0, description="Inventory item number")
    quantity: int = Field(..., gt=0, description="Units ordered (must be > 0)")

    class Config:
        json_schema_extra = {
            "example": {
                "order_no": 5001,
                "item_no": 101,
                "quantity": 2
            }
        }


class UpdateOrderLineRequestSchema(BaseModel):
    """
    Request schema for PUT /ordered-items/{order_no}/{item_no}

    The difference to the current quantity moves in or out of stock.
    """

    quantity: int = Field(..., gt=0, description="New units ordered (must be > 0)")
