"""Data Transfer Objects for Stock Ledger Use Cases

Pydantic models for command inputs and response outputs.
Commands carry raw values; range checks are done by the use cases so
that a non-positive quantity is reported as INVALID_INPUT.
"""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field


class ReceiveSupplyCommandDTO(BaseModel):
    """
    Command DTO for receiving supplied stock

    Used as input to ReceiveSupply use case.
    """

    item_no: int = Field(..., description="Inventory item number")
    supplier_no: int = Field(..., description="Supplier reference")
    quantity: int = Field(..., description="Units received (must be > 0)")
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


class UpdateSupplyCommandDTO(BaseModel):
    """
    Command DTO for correcting a supplied item receipt

    The old quantity is taken back from the old item and the new quantity
    is added to the (possibly different) new item.
    """

    serial_no: int = Field(..., description="Receipt serial number")
    item_no: int = Field(..., description="Inventory item number")
    supplier_no: int = Field(..., description="Supplier reference")
    quantity: int = Field(..., description="Units received (must be > 0)")
    purchase_date: date = Field(..., description="Purchase date")


class SupplyReceiptResponseDTO(BaseModel):
    """
    Response DTO for supplied item receipts

    quantity_on_hand is only set by the stock-moving use cases, not by reads.
    """

    serial_no: int = Field(..., description="Receipt serial number")
    item_no: int = Field(..., description="Inventory item number")
    item_name: str = Field(..., description="Inventory item name")
    supplier_no: int = Field(..., description="Supplier reference")
    quantity: int = Field(..., description="Units received")
    purchase_date: date = Field(..., description="Purchase date")
    quantity_on_hand: Optional[int] = Field(
        default=None,
        description="Item stock after the receipt was applied, changed or removed"
    )


class PlaceOrderLineCommandDTO(BaseModel):
    """
    Command DTO for placing an order line

    Used as input to PlaceOrderLine use case.
    """

    order_no: int = Field(..., description="Order number")
    item_no: int = Field(..., description="Inventory item number")
    quantity: int = Field(..., description="Units ordered (must be > 0)")

    class Config:
        json_schema_extra = {
            "example": {
                "order_no": 5001,
                "item_no": 101,
                "quantity": 2
            }
        }


class UpdateOrderLineCommandDTO(BaseModel):
    """Command DTO for changing the quantity of an existing line"""

    order_no: int = Field(..., description="Order number")
    item_no: int = Field(..., description="Inventory item number")
    quantity: int = Field(..., description="New units ordered (must be > 0)")


class OrderLineResponseDTO(BaseModel):
    """Response DTO for order line operations"""

    order_no: int = Field(..., description="Order number")
    item_no: int = Field(..., description="Inventory item number")
    item_name: str = Field(..., description="Inventory item name")
    quantity: int = Field(..., description="Units ordered")
    quantity_on_hand: Optional[int] = Field(
        default=None,
        description="Item stock after the line was placed, changed or cancelled"
    )


class OrderLinesResponseDTO(BaseModel):
    """Response DTO listing the lines of one order"""

    order_no: int = Field(..., description="Order number")
    lines: List[OrderLineResponseDTO] = Field(default_factory=list)
