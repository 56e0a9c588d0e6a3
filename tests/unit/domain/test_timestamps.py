"""Unit tests for entity timestamp defaults"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.domain.inventory_item import InventoryItem
from src.domain.order_line import OrderLine
from src.domain.payment import Payment, PaymentMethod
from src.domain.supplied_item import SuppliedItemReceipt


@pytest.mark.parametrize(
    "entity, field",
    [
        (InventoryItem(item_no=1, name="Rice", price=Decimal("1.00"), quantity=0), "updated_at"),
        (OrderLine(order_no=1, item_no=1, quantity=1), "created_at"),
        (
            Payment(
                payment_no=1,
                order_no=1,
                method=PaymentMethod.CASH_ON_DELIVERY,
                amount=Decimal("1.00"),
                payment_date=date(2024, 1, 1),
            ),
            "updated_at",
        ),
        (
            SuppliedItemReceipt(item_no=1, supplier_no=1, quantity=1, purchase_date=date(2024, 1, 1)),
            "created_at",
        ),
    ],
)
def test_default_timestamps_are_utc_aware(entity, field):
    """Naive datetimes are rejected by the column type; defaults must carry UTC"""
    value = getattr(entity, field)
    assert value.tzinfo is not None
    assert value.utcoffset() == timedelta(0)


@pytest.mark.parametrize("table", [InventoryItem, OrderLine, Payment, SuppliedItemReceipt])
def test_timestamp_columns_store_timezone(table):
    columns = [c for c in table.__table__.columns if c.name in ("created_at", "updated_at")]
    assert columns
    for column in columns:
        assert column.type.timezone is True
