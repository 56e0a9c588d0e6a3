"""Unit tests for RecordPayment and UpdatePayment use cases

Tests cover:
- amount is a snapshot of the order valuation
- orders that are missing or empty are rejected as INVALID_ORDER
- update re-values the payment's own order
"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.payments.record_payment import RecordPayment
from src.app.use_cases.payments.update_payment import UpdatePayment
from src.app.use_cases.payments.dtos import RecordPaymentCommandDTO, UpdatePaymentCommandDTO
from src.domain.order import Order
from src.domain.payment import Payment, PaymentMethod


@pytest.fixture
def mock_payment_repo():
    repo = MagicMock()
    repo.get_by_payment_no = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda payment: payment)
    repo.update = AsyncMock(side_effect=lambda payment: payment)
    return repo


@pytest.fixture
def mock_order_repo():
    repo = MagicMock()
    repo.get_by_order_no = AsyncMock(
        return_value=Order(order_no=5001, order_date=date(2024, 3, 2), customer_no=12, address="Main St")
    )
    return repo


@pytest.fixture
def mock_order_line_repo():
    repo = MagicMock()
    repo.list_priced_lines = AsyncMock(return_value=[(Decimal("10.00"), 2), (Decimal("5.50"), 1)])
    return repo


@pytest.fixture
def record_use_case(mock_uow, mock_payment_repo, mock_order_repo, mock_order_line_repo):
    return RecordPayment(mock_uow, mock_payment_repo, mock_order_repo, mock_order_line_repo)


@pytest.fixture
def update_use_case(mock_uow, mock_payment_repo, mock_order_repo, mock_order_line_repo):
    return UpdatePayment(mock_uow, mock_payment_repo, mock_order_repo, mock_order_line_repo)


@pytest.fixture
def record_command():
    return RecordPaymentCommandDTO(
        payment_no=9001,
        order_no=5001,
        method=PaymentMethod.CREDIT_CARD,
        payment_date=date(2024, 3, 3),
    )


@pytest.fixture
def existing_payment():
    return Payment(
        payment_no=9001,
        order_no=5001,
        method=PaymentMethod.CASH_ON_DELIVERY,
        amount=Decimal("25.50"),
        payment_date=date(2024, 3, 3),
        updated_at=datetime.now(timezone.utc),
    )


@pytest.mark.asyncio
class TestRecordPayment:
    async def test_amount_is_order_total(self, record_use_case, mock_payment_repo, mock_uow, record_command):
        result = await record_use_case.execute(record_command)

        assert result.is_ok()
        assert result.value.amount == Decimal("25.50")
        assert result.value.method == "credit card"
        assert result.value.method is PaymentMethod.CREDIT_CARD
        assert result.value.model_dump(mode="json")["method"] == "credit card"
        created = mock_payment_repo.create.call_args[0][0]
        assert created.amount == Decimal("25.50")
        assert created.order_no == 5001
        mock_uow.commit.assert_called_once()

    async def test_order_without_lines_is_invalid(
        self, record_use_case, mock_order_line_repo, mock_payment_repo, mock_uow, record_command
    ):
        mock_order_line_repo.list_priced_lines = AsyncMock(return_value=[])

        result = await record_use_case.execute(record_command)

        assert result.is_err()
        assert result.error.code == "INVALID_ORDER"
        mock_payment_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_missing_order_is_invalid(self, record_use_case, mock_order_repo, mock_payment_repo, record_command):
        mock_order_repo.get_by_order_no = AsyncMock(return_value=None)

        result = await record_use_case.execute(record_command)

        assert result.is_err()
        assert result.error.code == "INVALID_ORDER"
        mock_payment_repo.create.assert_not_called()

    async def test_duplicate_payment_number(
        self, record_use_case, mock_payment_repo, existing_payment, record_command
    ):
        mock_payment_repo.get_by_payment_no = AsyncMock(return_value=existing_payment)

        result = await record_use_case.execute(record_command)

        assert result.is_err()
        assert result.error.code == "PAYMENT_EXISTS"
        mock_payment_repo.create.assert_not_called()


@pytest.mark.asyncio
class TestUpdatePayment:
    async def test_takes_fresh_snapshot_of_same_order(
        self, update_use_case, mock_payment_repo, mock_order_line_repo, mock_uow, existing_payment
    ):
        """
        Given: A payment of 25.50 and a later line of 4.50 added to its order
        When: The payment is updated
        Then: amount becomes 30.00, method and date change, order_no stays
        """
        mock_payment_repo.get_by_payment_no = AsyncMock(return_value=existing_payment)
        mock_order_line_repo.list_priced_lines = AsyncMock(
            return_value=[(Decimal("10.00"), 2), (Decimal("5.50"), 1), (Decimal("4.50"), 1)]
        )
        command = UpdatePaymentCommandDTO(
            payment_no=9001,
            method=PaymentMethod.BANK_TRANSFER,
            payment_date=date(2024, 3, 10),
        )

        result = await update_use_case.execute(command)

        assert result.is_ok()
        assert result.value.amount == Decimal("30.00")
        assert result.value.method == "bank transfer"
        assert result.value.payment_date == date(2024, 3, 10)
        assert result.value.order_no == 5001
        mock_order_line_repo.list_priced_lines.assert_called_once_with(5001)
        mock_uow.commit.assert_called_once()

    async def test_missing_payment(self, update_use_case, mock_payment_repo):
        command = UpdatePaymentCommandDTO(
            payment_no=1, method=PaymentMethod.CREDIT_CARD, payment_date=date(2024, 3, 10)
        )

        result = await update_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "PAYMENT_NOT_FOUND"

    async def test_order_emptied_since_payment(
        self, update_use_case, mock_payment_repo, mock_order_line_repo, mock_uow, existing_payment
    ):
        mock_payment_repo.get_by_payment_no = AsyncMock(return_value=existing_payment)
        mock_order_line_repo.list_priced_lines = AsyncMock(return_value=[])
        command = UpdatePaymentCommandDTO(
            payment_no=9001, method=PaymentMethod.CREDIT_CARD, payment_date=date(2024, 3, 10)
        )

        result = await update_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "INVALID_ORDER"
        assert existing_payment.amount == Decimal("25.50")
        mock_payment_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()
