"""Payment use cases"""
from .record_payment import RecordPayment
from .update_payment import UpdatePayment
from .get_payment import GetPayment, ListPayments, DeletePayment
from .dtos import (
    RecordPaymentCommandDTO,
    UpdatePaymentCommandDTO,
    PaymentResponseDTO,
)

__all__ = [
    "RecordPayment",
    "UpdatePayment",
    "GetPayment",
    "ListPayments",
    "DeletePayment",
    "RecordPaymentCommandDTO",
    "UpdatePaymentCommandDTO",
    "PaymentResponseDTO",
]
