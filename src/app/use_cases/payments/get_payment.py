"""Payment read and delete Use Cases"""

from typing import List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.payment_repository import PaymentRepository
from src.app.use_cases.failures import store_failure
from .dtos import PaymentResponseDTO
from .update_payment import to_response_dto


def _not_found(payment_no: int) -> Error:
    return Error(code="PAYMENT_NOT_FOUND", message=f"Payment {payment_no} not found")


class GetPayment:
    """Returns the stored snapshot; the amount is never re-derived here"""

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(self, payment_no: int) -> Result[PaymentResponseDTO]:
        payment = await self.payment_repo.get_by_payment_no(payment_no)
        if not payment:
            return Return.err(_not_found(payment_no))
        return Return.ok(to_response_dto(payment))


class ListPayments:
    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(self) -> Result[List[PaymentResponseDTO]]:
        payments = await self.payment_repo.list_all()
        return Return.ok([to_response_dto(payment) for payment in payments])


class DeletePayment:
    def __init__(self, uow: UnitOfWork, payment_repo: PaymentRepository):
        self.uow = uow
        self.payment_repo = payment_repo

    async def execute(self, payment_no: int) -> Result[PaymentResponseDTO]:
        try:
            payment = await self.payment_repo.get_by_payment_no(payment_no)
            if not payment:
                return Return.err(_not_found(payment_no))

            response = to_response_dto(payment)
            await self.payment_repo.delete(payment)
            await self.uow.commit()
            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(store_failure(self.uow, e, "DELETE_PAYMENT_FAILED", "Failed to delete payment"))
