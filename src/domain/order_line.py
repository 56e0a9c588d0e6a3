"""Order Line Domain Entity

One item and quantity within an order.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer
from src.domain.base import BaseModel, utc_now


class OrderLine(BaseModel, table=True):
    """
    Order Line - Item requested by an order

    Domain Rules:
    - (order_no, item_no) is unique; re-ordering an item is rejected, not merged
    - quantity must be positive
    - Existence of a line means its stock decrement was already applied
    """

    __tablename__ = "ordered_items"
    __table_args__ = (
        CheckConstraint('quantity > 0', name='line_quantity_positive'),
    )

    order_no: int = Field(
        sa_column=Column(Integer, ForeignKey("orders.order_no", ondelete="CASCADE"), primary_key=True),
        description="Order reference"
    )

    item_no: int = Field(
        sa_column=Column(Integer, ForeignKey("inventory_items.item_no"), primary_key=True),
        description="Inventory item reference"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Ordered quantity (must be > 0)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="When the line was placed"
    )
