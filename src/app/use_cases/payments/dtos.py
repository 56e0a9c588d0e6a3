"""Data Transfer Objects for Payment Use Cases"""

from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from src.domain.payment import PaymentMethod


class RecordPaymentCommandDTO(BaseModel):
    """
    Command DTO for recording a payment

    The amount is not an input: it is taken from order valuation.
    """

    payment_no: int = Field(..., description="Payment number (client assigned)")
    order_no: int = Field(..., description="Order being paid")
    method: PaymentMethod = Field(..., description="Payment method")
    payment_date: date = Field(..., description="Date of payment")

    class Config:
        json_schema_extra = {
            "example": {
                "payment_no": 9001,
                "order_no": 5001,
                "method": "credit card",
                "payment_date": "2024-03-03"
            }
        }


class UpdatePaymentCommandDTO(BaseModel):
    """
    Command DTO for updating a payment

    The order reference cannot change; the amount is re-valued from it.
    """

    payment_no: int = Field(..., description="Payment number")
    method: PaymentMethod = Field(..., description="Payment method")
    payment_date: date = Field(..., description="Date of payment")


class PaymentResponseDTO(BaseModel):
    """Response DTO for payment operations"""

    payment_no: int = Field(..., description="Payment number")
    order_no: int = Field(..., description="Order paid")
    method: PaymentMethod = Field(..., description="Payment method")
    amount: Decimal = Field(..., description="Order total snapshot")
    payment_date: date = Field(..., description="Date of payment")
    updated_at: datetime = Field(..., description="When the snapshot was taken")

    class Config:
        json_schema_extra = {
            "example": {
                "payment_no": 9001,
                "order_no": 5001,
                "method": "credit card",
                "amount": "25.50",
                "payment_date": "2024-03-03",
                "updated_at": "2024-03-03T10:00:00Z"
            }
        }
