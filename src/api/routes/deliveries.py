"""Deliveries API Routes"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.delivery_request import RecordDeliveryRequestSchema, UpdateDeliveryRequestSchema
from src.app.use_cases.deliveries.dtos import (
    RecordDeliveryCommandDTO,
    UpdateDeliveryStatusCommandDTO,
    DeliveryResponseDTO,
)
from src.app.use_cases.deliveries.manage_deliveries import (
    RecordDelivery,
    UpdateDeliveryStatus,
    GetDelivery,
    ListDeliveries,
    DeleteDelivery,
)
from src.adapter.repositories.delivery_repository import SqlAlchemyDeliveryRepository
from src.adapter.repositories.order_repository import SqlAlchemyOrderRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/deliveries", tags=["Deliveries"])


@router.post("", response_model=DeliveryResponseDTO, status_code=status.HTTP_201_CREATED)
async def record_delivery(
    request: RecordDeliveryRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Assign an order for delivery.

    The delivery record and the order's status row are written together.

    **Returns:**
    - 201: Delivery recorded
    - 400: `DELIVERY_EXISTS`
    - 404: `ORDER_NOT_FOUND`
    """
    command = RecordDeliveryCommandDTO(**request.model_dump())
    use_case = RecordDelivery(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyDeliveryRepository(session),
        SqlAlchemyOrderRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("", response_model=List[DeliveryResponseDTO])
async def list_deliveries(session: AsyncSession = Depends(get_session)):
    result = await ListDeliveries(SqlAlchemyDeliveryRepository(session)).execute()
    return result.value


@router.get("/{delivery_no}", response_model=DeliveryResponseDTO)
async def get_delivery(delivery_no: int, session: AsyncSession = Depends(get_session)):
    result = await GetDelivery(SqlAlchemyDeliveryRepository(session)).execute(delivery_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/{delivery_no}", response_model=DeliveryResponseDTO)
async def update_delivery(
    delivery_no: int,
    request: UpdateDeliveryRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    command = UpdateDeliveryStatusCommandDTO(delivery_no=delivery_no, **request.model_dump())
    use_case = UpdateDeliveryStatus(SqlAlchemyUnitOfWork(session), SqlAlchemyDeliveryRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{delivery_no}", response_model=DeliveryResponseDTO)
async def delete_delivery(delivery_no: int, session: AsyncSession = Depends(get_session)):
    """Remove the delivery and its order's status row together."""
    use_case = DeleteDelivery(SqlAlchemyUnitOfWork(session), SqlAlchemyDeliveryRepository(session))
    result = await use_case.execute(delivery_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
