"""Payment Domain Entity

Payment against exactly one order. The amount is a snapshot of the order
total taken when the payment is recorded or updated.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Column
from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric
from src.domain.base import BaseModel, utc_now


class PaymentMethod(str, Enum):
    """Accepted payment methods"""
    CREDIT_CARD = "credit card"
    CASH_ON_DELIVERY = "cash on delivery"
    BANK_TRANSFER = "bank transfer"


class Payment(BaseModel, table=True):
    """
    Payment - Snapshot of an order total at payment time

    Domain Rules:
    - payment_no is assigned by the client and unique
    - order_no never changes after creation
    - amount is copied from order valuation, it does not follow later line changes
    """

    __tablename__ = "payments"

    payment_no: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=False),
        description="Payment number (client assigned)"
    )

    order_no: int = Field(
        sa_column=Column(Integer, ForeignKey("orders.order_no"), nullable=False, index=True),
        description="Order being paid (immutable)"
    )

    method: PaymentMethod = Field(
        description="Payment method"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Order total snapshot (precision: 10,2)"
    )

    payment_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date of payment"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last time the snapshot was taken"
    )
