"""Order Domain Entity

Customer order header. The order amount is derived from its lines
at read time and never stored.
"""

from datetime import date
from sqlmodel import Field, Column
from sqlalchemy import Date, Integer, String
from src.domain.base import BaseModel


class Order(BaseModel, table=True):
    """
    Order - Customer order header

    Domain Rules:
    - order_no is assigned by the client and unique
    - amount is not a column: it is the sum of price * quantity over order lines
    """

    __tablename__ = "orders"

    order_no: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=False),
        description="Order number (client assigned)"
    )

    order_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the order was placed"
    )

    customer_no: int = Field(
        index=True,
        description="Customer reference"
    )

    address: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Delivery address"
    )
