"""Request schemas for Payment API"""

from datetime import date
from pydantic import BaseModel, Field, field_validator
from src.domain.payment import PaymentMethod


class RecordPaymentRequestSchema(BaseModel):
    """
    Request schema for recording a payment

    Used for POST /payments endpoint. The amount is computed, not accepted.
    """

    payment_no: int = Field(..., gt=0, description="Payment number (required, positive)")
    order_no: int = Field(..., gt=0, description="Order being paid")
    method: PaymentMethod = Field(..., description="credit card, cash on delivery or bank transfer")
    payment_date: date = Field(..., description="Date of payment")

    @field_validator('method', mode='before')
    @classmethod
    def normalize_method(cls, v):
        """Accept any letter case, e.g. 'Credit Card'"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "payment_no": 9001,
                "order_no": 5001,
                "method": "credit card",
                "payment_date": "2024-03-03"
            }
        }


class UpdatePaymentRequestSchema(BaseModel):
    """
    Request schema for PUT /payments/{payment_no}

    The order reference is not part of the body: it cannot be changed.
    """

    method: PaymentMethod = Field(..., description="credit card, cash on delivery or bank transfer")
    payment_date: date = Field(..., description="Date of payment")

    @field_validator('method', mode='before')
    @classmethod
    def normalize_method(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v
