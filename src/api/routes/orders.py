"""Orders API Routes

Order headers with an amount derived from the current lines and prices.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.order_request import CreateOrderRequestSchema, UpdateOrderRequestSchema
from src.app.use_cases.orders.dtos import (
    CreateOrderCommandDTO,
    UpdateOrderCommandDTO,
    OrderResponseDTO,
)
from src.app.use_cases.orders.create_order import CreateOrder
from src.app.use_cases.orders.update_order import UpdateOrder
from src.app.use_cases.orders.get_order import GetOrder, ListOrders
from src.app.use_cases.orders.delete_order import DeleteOrder
from src.adapter.repositories.delivery_repository import SqlAlchemyDeliveryRepository
from src.adapter.repositories.inventory_repository import SqlAlchemyInventoryRepository
from src.adapter.repositories.order_repository import SqlAlchemyOrderRepository
from src.adapter.repositories.order_line_repository import SqlAlchemyOrderLineRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("", response_model=List[OrderResponseDTO])
async def list_orders(session: AsyncSession = Depends(get_session)):
    """List every order with its amount recomputed from current lines."""
    use_case = ListOrders(SqlAlchemyOrderRepository(session), SqlAlchemyOrderLineRepository(session))
    result = await use_case.execute()
    return result.value


@router.get(
    "/{order_no}",
    response_model=OrderResponseDTO,
    responses={
        404: {
            "description": "Order not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ORDER_NOT_FOUND",
                            "message": "Order 5001 not found"
                        }
                    }
                }
            }
        }
    }
)
async def get_order(order_no: int, session: AsyncSession = Depends(get_session)):
    """
    Get one order.

    `amount` is the sum of price × quantity over its lines, rounded
    half-to-even to cents. An order without lines has amount 0.00.
    """
    use_case = GetOrder(SqlAlchemyOrderRepository(session), SqlAlchemyOrderLineRepository(session))
    result = await use_case.execute(order_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("", response_model=OrderResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    command = CreateOrderCommandDTO(**request.model_dump())
    use_case = CreateOrder(SqlAlchemyUnitOfWork(session), SqlAlchemyOrderRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/{order_no}", response_model=OrderResponseDTO)
async def update_order(
    order_no: int,
    request: UpdateOrderRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    command = UpdateOrderCommandDTO(order_no=order_no, **request.model_dump())
    use_case = UpdateOrder(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyOrderRepository(session),
        SqlAlchemyOrderLineRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete("/{order_no}", response_model=OrderResponseDTO)
async def delete_order(order_no: int, session: AsyncSession = Depends(get_session)):
    """
    Delete an order and return the units of its lines to stock.

    **Returns:**
    - 200: Order removed, `amount` is its value before the delete
    - 400: `ORDER_IN_USE` when the order has a payment or a delivery
    - 404: `ORDER_NOT_FOUND`
    - 503: `TRANSIENT_STORE_FAILURE`, safe to retry
    """
    use_case = DeleteOrder(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyOrderRepository(session),
        SqlAlchemyOrderLineRepository(session),
        SqlAlchemyInventoryRepository(session),
        SqlAlchemyPaymentRepository(session),
        SqlAlchemyDeliveryRepository(session),
    )
    result = await use_case.execute(order_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
