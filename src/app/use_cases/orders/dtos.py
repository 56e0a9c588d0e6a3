"""Data Transfer Objects for Order Use Cases"""

from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field


class CreateOrderCommandDTO(BaseModel):
    """
    Command DTO for creating an order header

    Used as input to CreateOrder use case.
    """

    order_no: int = Field(..., description="Order number (client assigned)")
    order_date: date = Field(..., description="Order date")
    customer_no: int = Field(..., description="Customer reference")
    address: str = Field(..., description="Delivery address")

    class Config:
        json_schema_extra = {
            "example": {
                "order_no": 5001,
                "order_date": "2024-03-02",
                "customer_no": 12,
                "address": "14 Canal Road, Lahore"
            }
        }


class UpdateOrderCommandDTO(BaseModel):
    """Command DTO for changing an order header (order_no is fixed)"""

    order_no: int = Field(..., description="Order number")
    order_date: date = Field(..., description="Order date")
    customer_no: int = Field(..., description="Customer reference")
    address: str = Field(..., description="Delivery address")


class OrderTotalDTO(BaseModel):
    """
    Result of order valuation

    line_count lets callers tell an empty order from one whose lines
    are all priced at zero.
    """

    order_no: int = Field(..., description="Order number")
    amount: Decimal = Field(..., description="Sum of price * quantity, rounded half-to-even to cents")
    line_count: int = Field(..., description="Number of order lines valued")


class OrderResponseDTO(BaseModel):
    """
    Response DTO for order reads

    amount is recomputed from current lines and prices on every read.
    """

    order_no: int = Field(..., description="Order number")
    order_date: date = Field(..., description="Order date")
    customer_no: int = Field(..., description="Customer reference")
    address: str = Field(..., description="Delivery address")
    amount: Decimal = Field(..., description="Derived order amount")

    class Config:
        json_schema_extra = {
            "example": {
                "order_no": 5001,
                "order_date": "2024-03-02",
                "customer_no": 12,
                "address": "14 Canal Road, Lahore",
                "amount": "25.50"
            }
        }
