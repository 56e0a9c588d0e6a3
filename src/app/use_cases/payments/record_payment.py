"""RecordPayment Use Case

Records a payment whose amount is a snapshot of the order total.
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
from .dtos import RecordPaymentCommandDTO, PaymentResponseDTO
from .update_payment import invalid_order_error, to_response_dto

logger = logging.getLogger(__name__)


class RecordPayment:
    """
    Use Case: Record a payment against an order

    Business Rules:
    1. payment_no must be new
    2. Order must exist and have at least one line
    3. amount = order valuation at this moment, stored as a copy

    Flow:
    1. Reject duplicate payment number
    2. Check order exists
    3. Value the order
    4. Insert payment with the snapshot amount
    5. Commit transaction
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

    async def execute(self, command: RecordPaymentCommandDTO) -> Result[PaymentResponseDTO]:
        try:
            existing = await self.payment_repo.get_by_payment_no(command.payment_no)
            if existing:
                return Return.err(
                    Error(
                        code="PAYMENT_EXISTS",
                        message=f"Payment {command.payment_no} already exists",
                    )
                )

            order = await self.order_repo.get_by_order_no(command.order_no)
            if not order:
                return Return.err(invalid_order_error(command.order_no, "order does not exist"))

            total = (await self.valuation.execute(command.order_no)).value
            if total.line_count == 0:
                return Return.err(invalid_order_error(command.order_no, "order has no items"))

            payment = await self.payment_repo.create(
                Payment(
                    payment_no=command.payment_no,
                    order_no=command.order_no,
                    method=command.method,
                    amount=total.amount,
                    payment_date=command.payment_date,
                )
            )
            await self.uow.commit()

            logger.info(
                f"Payment recorded: payment={payment.payment_no} order={payment.order_no} amount={total.amount}"
            )
            return Return.ok(to_response_dto(payment))

        except Exception as e:
            await self.uow.rollback()
            if self.uow.is_unique_violation(e):
                return Return.err(
                    Error(code="PAYMENT_EXISTS", message=f"Payment {command.payment_no} already exists")
                )
            return Return.err(store_failure(self.uow, e, "RECORD_PAYMENT_FAILED", "Failed to record payment"))
