"""Delivery Use Cases

A delivery and its status row are created and deleted in one transaction
so an order never has one without the other.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.delivery_repository import DeliveryRepository
from src.app.repositories.order_repository import OrderRepository
from src.app.use_cases.failures import store_failure
from src.domain.delivery import Delivery, DeliveryStatus
from .dtos import (
    RecordDeliveryCommandDTO,
    UpdateDeliveryStatusCommandDTO,
    DeliveryResponseDTO,
)


def _to_response_dto(delivery: Delivery, status: DeliveryStatus) -> DeliveryResponseDTO:
    return DeliveryResponseDTO(
        delivery_no=delivery.delivery_no,
        order_no=delivery.order_no,
        employee_no=delivery.employee_no,
        status=status.status,
        expected_time=status.expected_time,
    )


def _not_found(delivery_no: int) -> Error:
    return Error(code="DELIVERY_NOT_FOUND", message=f"Delivery {delivery_no} not found")


class RecordDelivery:
    """
    Use Case: Assign an order for delivery

    Business Rules:
    1. Order must exist
    2. delivery_no must be new and the order must not already have a status row
    3. Atomic updates: delivery and status rows commit together
    """

    def __init__(
        self,
        uow: UnitOfWork,
        delivery_repo: DeliveryRepository,
        order_repo: OrderRepository,
    ):
        self.uow = uow
        self.delivery_repo = delivery_repo
        self.order_repo = order_repo

    async def execute(self, command: RecordDeliveryCommandDTO) -> Result[DeliveryResponseDTO]:
        try:
            order = await self.order_repo.get_by_order_no(command.order_no)
            if not order:
                return Return.err(
                    Error(code="ORDER_NOT_FOUND", message=f"Order {command.order_no} not found")
                )

            if await self.delivery_repo.get_by_delivery_no(command.delivery_no):
                return Return.err(
                    Error(code="DELIVERY_EXISTS", message=f"Delivery {command.delivery_no} already exists")
                )

            if await self.delivery_repo.get_status(command.order_no):
                return Return.err(
                    Error(
                        code="DELIVERY_EXISTS",
                        message=f"Order {command.order_no} already has a delivery status",
                    )
                )

            delivery, status = await self.delivery_repo.create(
                Delivery(
                    delivery_no=command.delivery_no,
                    order_no=command.order_no,
                    employee_no=command.employee_no,
                ),
                DeliveryStatus(
                    order_no=command.order_no,
                    status=command.status,
                    expected_time=command.expected_time,
                    employee_no=command.employee_no,
                ),
            )
            await self.uow.commit()
            return Return.ok(_to_response_dto(delivery, status))

        except Exception as e:
            await self.uow.rollback()
            if self.uow.is_unique_violation(e):
                return Return.err(
                    Error(
                        code="DELIVERY_EXISTS",
                        message=f"Delivery {command.delivery_no} or its order status already exists",
                    )
                )
            return Return.err(store_failure(self.uow, e, "RECORD_DELIVERY_FAILED", "Failed to record delivery"))


class UpdateDeliveryStatus:
    def __init__(self, uow: UnitOfWork, delivery_repo: DeliveryRepository):
        self.uow = uow
        self.delivery_repo = delivery_repo

    async def execute(self, command: UpdateDeliveryStatusCommandDTO) -> Result[DeliveryResponseDTO]:
        try:
            row = await self.delivery_repo.get_by_delivery_no(command.delivery_no)
            if not row:
                return Return.err(_not_found(command.delivery_no))

            delivery, status = row
            status.status = command.status
            status.expected_time = command.expected_time
            status = await self.delivery_repo.update_status(status)
            await self.uow.commit()
            return Return.ok(_to_response_dto(delivery, status))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(store_failure(self.uow, e, "UPDATE_DELIVERY_FAILED", "Failed to update delivery"))


class GetDelivery:
    def __init__(self, delivery_repo: DeliveryRepository):
        self.delivery_repo = delivery_repo

    async def execute(self, delivery_no: int) -> Result[DeliveryResponseDTO]:
        row = await self.delivery_repo.get_by_delivery_no(delivery_no)
        if not row:
            return Return.err(_not_found(delivery_no))
        return Return.ok(_to_response_dto(*row))


class ListDeliveries:
    def __init__(self, delivery_repo: DeliveryRepository):
        self.delivery_repo = delivery_repo

    async def execute(self) -> Result[List[DeliveryResponseDTO]]:
        rows = await self.delivery_repo.list_all()
        return Return.ok([_to_response_dto(delivery, status) for delivery, status in rows])


class DeleteDelivery:
    """Removes the delivery and its status row together"""

    def __init__(self, uow: UnitOfWork, delivery_repo: DeliveryRepository):
        self.uow = uow
        self.delivery_repo = delivery_repo

    async def execute(self, delivery_no: int) -> Result[DeliveryResponseDTO]:
        try:
            row = await self.delivery_repo.get_by_delivery_no(delivery_no)
            if not row:
                return Return.err(_not_found(delivery_no))

            delivery, status = row
            response = _to_response_dto(delivery, status)
            await self.delivery_repo.delete(delivery, status)
            await self.uow.commit()
            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(store_failure(self.uow, e, "DELETE_DELIVERY_FAILED", "Failed to delete delivery"))
