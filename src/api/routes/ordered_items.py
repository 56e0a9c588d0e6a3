"""Ordered Items API Routes

Placing, changing and cancelling order lines; each moves inventory stock.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.order_request import PlaceOrderLineRequestSchema, UpdateOrderLineRequestSchema
from src.app.use_cases.stock.dtos import (
    PlaceOrderLineCommandDTO,
    UpdateOrderLineCommandDTO,
    OrderLineResponseDTO,
    OrderLinesResponseDTO,
)
from src.app.use_cases.stock.place_order_line import PlaceOrderLine
from src.app.use_cases.stock.update_order_line import UpdateOrderLine
from src.app.use_cases.stock.cancel_order_line import CancelOrderLine
from src.app.use_cases.stock.list_order_lines import ListOrderLines
from src.adapter.repositories.inventory_repository import SqlAlchemyInventoryRepository
from src.adapter.repositories.order_repository import SqlAlchemyOrderRepository
from src.adapter.repositories.order_line_repository import SqlAlchemyOrderLineRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/ordered-items", tags=["Ordered Items"])


@router.post(
    "",
    response_model=OrderLineResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Insufficient stock or item already on the order",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INSUFFICIENT_STOCK",
                            "message": "Insufficient stock. Requested: 3, Available: 2",
                            "reason": "available=2, requested=3",
                            "details": {"available": 2}
                        }
                    }
                }
            }
        },
        404: {"description": "Order or inventory item not found"},
        503: {"description": "Lock timeout or deadlock, retry the request"},
    }
)
async def place_order_line(
    request: PlaceOrderLineRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Add an item to an order and take the units out of stock.

    The line insert and the stock decrement are one transaction. Two
    requests racing for the last units cannot both succeed; the loser
    receives `INSUFFICIENT_STOCK` with the quantity still available.

    **Returns:**
    - 201: Line placed, `quantity_on_hand` is the remaining stock
    - 400: `INSUFFICIENT_STOCK`, `ORDER_LINE_EXISTS` or `INVALID_INPUT`
    - 404: `ORDER_NOT_FOUND` or `ITEM_NOT_FOUND`
    - 503: `TRANSIENT_STORE_FAILURE`, safe to retry
    """
    uow = SqlAlchemyUnitOfWork(session)
    inventory_repo = SqlAlchemyInventoryRepository(session)
    order_repo = SqlAlchemyOrderRepository(session)
    order_line_repo = SqlAlchemyOrderLineRepository(session)

    command = PlaceOrderLineCommandDTO(
        order_no=request.order_no,
        item_no=request.item_no,
        quantity=request.quantity,
    )

    use_case = PlaceOrderLine(uow, inventory_repo, order_repo, order_line_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{order_no}",
    response_model=OrderLinesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_order_lines(
    order_no: int,
    session: AsyncSession = Depends(get_session)
):
    """List the items on an order with their names and quantities."""
    use_case = ListOrderLines(SqlAlchemyOrderRepository(session), SqlAlchemyOrderLineRepository(session))
    result = await use_case.execute(order_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put(
    "/{order_no}/{item_no}",
    response_model=OrderLineResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Not enough stock for the extra units"},
        404: {"description": "Item is not on the order"},
        503: {"description": "Lock timeout or deadlock, retry the request"},
    }
)
async def update_order_line(
    order_no: int,
    item_no: int,
    request: UpdateOrderLineRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Change the ordered quantity of an item.

    Raising the quantity takes the extra units out of stock under the same
    guard as placing a line; lowering it returns the difference.

    **Returns:**
    - 200: Line changed, `quantity_on_hand` is the resulting stock
    - 400: `INSUFFICIENT_STOCK` with `details.available`
    - 404: `ORDER_LINE_NOT_FOUND`
    - 503: `TRANSIENT_STORE_FAILURE`, safe to retry
    """
    command = UpdateOrderLineCommandDTO(order_no=order_no, item_no=item_no, quantity=request.quantity)
    use_case = UpdateOrderLine(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInventoryRepository(session),
        SqlAlchemyOrderLineRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{order_no}/{item_no}",
    response_model=OrderLineResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def cancel_order_line(
    order_no: int,
    item_no: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Remove an item from an order and return its units to stock.

    **Returns:**
    - 200: Line removed, `quantity_on_hand` is the restored stock
    - 404: `ORDER_LINE_NOT_FOUND`
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CancelOrderLine(
        uow,
        SqlAlchemyInventoryRepository(session),
        SqlAlchemyOrderLineRepository(session),
    )
    result = await use_case.execute(order_no, item_no)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
