"""Supplied Item Receipt Domain Entity

Record of stock received from a supplier.
"""

from datetime import date, datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Date, DateTime, ForeignKey, Integer
from src.domain.base import BaseModel, utc_now


class SuppliedItemReceipt(BaseModel, table=True):
    """
    Supplied Item Receipt - Goods received for an inventory item

    Domain Rules:
    - serial_no is auto-assigned
    - quantity must be positive
    - Creating a receipt increments the item's quantity in the same transaction
    - Editing or removing a receipt moves the same stock back, never below zero
    """

    __tablename__ = "supplied_items"
    __table_args__ = (
        CheckConstraint('quantity > 0', name='receipt_quantity_positive'),
    )

    serial_no: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
        description="Receipt serial number (auto-increment)"
    )

    item_no: int = Field(
        sa_column=Column(Integer, ForeignKey("inventory_items.item_no"), nullable=False, index=True),
        description="Inventory item reference"
    )

    supplier_no: int = Field(
        description="Supplier reference"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Received quantity (must be > 0)"
    )

    purchase_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Purchase date"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Receipt timestamp"
    )
