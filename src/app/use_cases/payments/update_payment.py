"""UpdatePayment Use Case

Changes method and date of a payment and takes a fresh amount snapshot
from its order.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.order_repository import OrderRepository
from src.app.repositories.order_line_repository import OrderLineRepository
from src.app.repositories.payment_repository import PaymentRepository
from src.app.use_cases.failures import store_failure
from src.app.use_cases.orders.compute_order_total import ComputeOrderTotal
from src.domain.payment import Payment
from .dtos import UpdatePaymentCommandDTO, PaymentResponseDTO

logger = logging.getLogger(__name__)


class UpdatePayment:
    """
    Use Case: Update a payment

    Business Rules:
    1. Payment must exist
    2. The payment's order reference is immutable
    3. amount is re-valued from that order and overwritten
    4. Order must still have at least one line
    """

    def __init__(
        self,
        uow: UnitOfWork,
        payment_repo: PaymentRepository,
        order_repo: OrderRepository,
        order_line_repo: OrderLineRepository,
    ):
        self.uow = uow
        self.payment_repo = payment_repo
        self.order_repo = order_repo
        self.valuation = ComputeOrderTotal(order_line_repo)

    async def execute(self, command: UpdatePaymentCommandDTO) -> Result[PaymentResponseDTO]:
        try:
            payment = await self.payment_repo.get_by_payment_no(command.payment_no)
            if not payment:
                return Return.err(
                    Error(
                        code="PAYMENT_NOT_FOUND",
                        message=f"Payment {command.payment_no} not found",
                    )
                )

            order = await self.order_repo.get_by_order_no(payment.order_no)
            if not order:
                return Return.err(invalid_order_error(payment.order_no, "order does not exist"))

            total = (await self.valuation.execute(payment.order_no)).value
            if total.line_count == 0:
                return Return.err(invalid_order_error(payment.order_no, "order has no items"))

            previous_amount = payment.amount
            payment.method = command.method
            payment.payment_date = command.payment_date
            payment.amount = total.amount
            payment = await self.payment_repo.update(payment)
            await self.uow.commit()

            logger.info(
                f"Payment updated: payment={payment.payment_no} order={payment.order_no} "
                f"amount {previous_amount} -> {total.amount}"
            )
            return Return.ok(to_response_dto(payment))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(store_failure(self.uow, e, "UPDATE_PAYMENT_FAILED", "Failed to update payment"))


def invalid_order_error(order_no: int, reason: str) -> Error:
    return Error(
        code="INVALID_ORDER",
        message=f"Order {order_no} not found or has no items",
        reason=reason,
    )


def to_response_dto(payment: Payment) -> PaymentResponseDTO:
    return PaymentResponseDTO(
        payment_no=payment.payment_no,
        order_no=payment.order_no,
        method=payment.method,
        amount=payment.amount,
        payment_date=payment.payment_date,
        updated_at=payment.updated_at,
    )
