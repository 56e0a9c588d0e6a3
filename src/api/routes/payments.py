"""Payments API Routes

Payment amounts are snapshots of the order total, taken on create and update.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.payment_request import RecordPaymentRequestSchema, UpdatePaymentRequestSchema
from src.app.use_cases.payments.dtos import (
    RecordPaymentCommandDTO,
    UpdatePaymentCommandDTO,
    PaymentResponseDTO,
)
from src.app.use_cases.payments.record_payment import RecordPayment
from src.app.use_cases.payments.update_payment import UpdatePayment
from src.app.use_cases.payments.get_payment import GetPayment, ListPayments, DeletePayment
from src.adapter.repositories.order_repository import SqlAlchemyOrderRepository
from src.adapter.repositories.order_line_repository import SqlAlchemyOrderLineRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/payments", tags=["Payments"])

INVALID_ORDER_RESPONSE = {
    "description": "Order missing or has no items",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVALID_ORDER",
                    "message": "Order 5001 not found or has no items",
                    "reason": "order has no items"
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=PaymentResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={400: INVALID_ORDER_RESPONSE},
)
async def record_payment(
    request: RecordPaymentRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Record a payment for an order.

    The amount is computed from the order's current lines and stored as a
    fixed snapshot; later changes to the order do not alter it.

    **Returns:**
    - 201: Payment recorded with the computed `amount`
    - 400: `INVALID_ORDER` or `PAYMENT_EXISTS`
    """
    command = RecordPaymentCommandDTO(**request.model_dump())
    use_case = RecordPayment(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyOrderRepository(session),
        SqlAlchemyOrderLineRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put(
    "/{payment_no}",
    response_model=PaymentResponseDTO,
    responses={400: INVALID_ORDER_RESPONSE},
)
async def update_payment(
    payment_no: int,
    request: UpdatePaymentRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Change method and date, and re-take the amount snapshot from the
    payment's own order. The order reference itself cannot change.
    """
    command = UpdatePaymentCommandDTO(payment_no=payment_no, **request.model_dump())
    use_case = UpdatePayment(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyOrderRepository(session),
        SqlAlchemyOrderLineRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=List[PaymentResponseDTO])
async def list_payments(session: AsyncSession = Depends(get_session)):
    result = await ListPayments(SqlAlchemyPaymentRepository(session)).execute()
    return result.value


@router.get("/{payment_no}", response_model=PaymentResponseDTO)
async def get_payment(payment_no: int, session: AsyncSession = Depends(get_session)):
    result = await GetPayment(SqlAlchemyPaymentRepository(session)).execute(payment_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{payment_no}", response_model=PaymentResponseDTO)
async def delete_payment(payment_no: int, session: AsyncSession = Depends(get_session)):
    use_case = DeletePayment(SqlAlchemyUnitOfWork(session), SqlAlchemyPaymentRepository(session))
    result = await use_case.execute(payment_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
