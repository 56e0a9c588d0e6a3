"""Inventory Item Domain Entity

Catalogue entry with unit price and quantity on hand.
Quantity only changes through the stock ledger (supply receipts and order lines).
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, DateTime, Integer, Numeric, String
from src.domain.base import BaseModel, utc_now


class InventoryItem(BaseModel, table=True):
    """
    Inventory Item - Stocked product

    Domain Rules:
    - item_no is assigned by the client and unique
    - price must be non-negative
    - quantity must never go below zero
    - quantity is mutated only by stock ledger operations
    """

    __tablename__ = "inventory_items"
    __table_args__ = (
        CheckConstraint('price >= 0', name='price_non_negative'),
        CheckConstraint('quantity >= 0', name='quantity_non_negative'),
    )

    item_no: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=False),
        description="Item number (client assigned)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Item name"
    )

    category: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Item category"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Unit price (precision: 10,2)"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False, default=0),
        description="Quantity on hand (must be >= 0)"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last stock or catalogue change"
    )

    class Config:
        """SQLModel configuration"""
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
