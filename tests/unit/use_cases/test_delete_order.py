"""Unit tests for DeleteOrder use case"""

import pytest
from datetime import date, time
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.orders.delete_order import DeleteOrder
from src.domain.delivery import DeliveryState, DeliveryStatus
from src.domain.order import Order
from src.domain.order_line import OrderLine


@pytest.fixture
def lines():
    return {
        102: OrderLine(order_no=5001, item_no=102, quantity=1),
        101: OrderLine(order_no=5001, item_no=101, quantity=2),
    }


@pytest.fixture
def repos(lines):
    order_repo = MagicMock()
    order_repo.get_by_order_no = AsyncMock(
        return_value=Order(order_no=5001, order_date=date(2024, 3, 2), customer_no=12, address="Main St")
    )
    order_repo.delete = AsyncMock()

    order_line_repo = MagicMock()
    order_line_repo.list_by_order = AsyncMock(
        return_value=[(line, f"Item {item_no}") for item_no, line in lines.items()]
    )
    order_line_repo.list_priced_lines = AsyncMock(return_value=[(Decimal("10.00"), 2), (Decimal("5.50"), 1)])
    order_line_repo.get = AsyncMock(side_effect=lambda order_no, item_no: lines.get(item_no))
    order_line_repo.delete = AsyncMock()

    inventory_repo = MagicMock()
    inventory_repo.get_by_item_no = AsyncMock()
    inventory_repo.increment_quantity = AsyncMock()

    payment_repo = MagicMock()
    payment_repo.exists_for_order = AsyncMock(return_value=False)

    delivery_repo = MagicMock()
    delivery_repo.get_status = AsyncMock(return_value=None)

    return order_repo, order_line_repo, inventory_repo, payment_repo, delivery_repo


@pytest.fixture
def delete_use_case(mock_uow, repos):
    return DeleteOrder(mock_uow, *repos)


@pytest.mark.asyncio
class TestDeleteOrder:
    async def test_restocks_every_line_then_deletes(self, delete_use_case, repos, mock_uow):
        """
        Given: Order with lines 101 x 2 and 102 x 1
        When: The order is deleted
        Then: Items are locked in item_no order, each line's units return,
              the order goes and one commit covers everything
        """
        order_repo, order_line_repo, inventory_repo, _, _ = repos

        result = await delete_use_case.execute(5001)

        assert result.is_ok()
        assert result.value.amount == Decimal("25.50")
        order_repo.get_by_order_no.assert_called_once_with(5001, for_update=True)
        locked = [call.args[0] for call in inventory_repo.get_by_item_no.call_args_list]
        assert locked == [101, 102]
        increments = [call.args for call in inventory_repo.increment_quantity.call_args_list]
        assert increments == [(101, 2), (102, 1)]
        assert order_line_repo.delete.call_count == 2
        order_repo.delete.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_paid_order_is_kept(self, delete_use_case, repos, mock_uow):
        order_repo, _, inventory_repo, payment_repo, _ = repos
        payment_repo.exists_for_order = AsyncMock(return_value=True)

        result = await delete_use_case.execute(5001)

        assert result.is_err()
        assert result.error.code == "ORDER_IN_USE"
        inventory_repo.increment_quantity.assert_not_called()
        order_repo.delete.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_order_with_delivery_is_kept(self, delete_use_case, repos):
        order_repo, _, _, _, delivery_repo = repos
        delivery_repo.get_status = AsyncMock(
            return_value=DeliveryStatus(
                order_no=5001, status=DeliveryState.PENDING, expected_time=time(9, 0), employee_no=4
            )
        )

        result = await delete_use_case.execute(5001)

        assert result.is_err()
        assert result.error.code == "ORDER_IN_USE"
        order_repo.delete.assert_not_called()

    async def test_unknown_order(self, delete_use_case, repos):
        order_repo, _, inventory_repo, _, _ = repos
        order_repo.get_by_order_no = AsyncMock(return_value=None)

        result = await delete_use_case.execute(404)

        assert result.is_err()
        assert result.error.code == "ORDER_NOT_FOUND"
        inventory_repo.get_by_item_no.assert_not_called()

    async def test_store_error_rolls_back(self, delete_use_case, repos, mock_uow):
        _, _, inventory_repo, _, _ = repos
        inventory_repo.increment_quantity = AsyncMock(side_effect=RuntimeError("disk full"))

        result = await delete_use_case.execute(5001)

        assert result.is_err()
        assert result.error.code == "DELETE_ORDER_FAILED"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
