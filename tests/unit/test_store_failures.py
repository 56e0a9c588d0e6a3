"""Unit tests for driver error classification and HTTP status mapping"""

import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import status_for


class FakeDriverError(Exception):
    def __init__(self, message, sqlstate=None):
        super().__init__(message)
        self.sqlstate = sqlstate


@pytest.fixture
def uow():
    return SqlAlchemyUnitOfWork(MagicMock())


class TestTransientClassification:
    @pytest.mark.parametrize("sqlstate", ["40001", "40P01", "55P03", "57014"])
    def test_postgres_lock_and_serialization_failures(self, uow, sqlstate):
        exc = DBAPIError("UPDATE", {}, FakeDriverError("lock", sqlstate=sqlstate))
        assert uow.is_transient_failure(exc)

    def test_sqlite_database_locked(self, uow):
        exc = OperationalError("UPDATE", {}, FakeDriverError("database is locked"))
        assert uow.is_transient_failure(exc)

    def test_constraint_violation_is_not_transient(self, uow):
        exc = IntegrityError("INSERT", {}, FakeDriverError("duplicate key", sqlstate="23505"))
        assert not uow.is_transient_failure(exc)
        assert uow.is_unique_violation(exc)

    @pytest.mark.parametrize(
        "orig",
        [
            FakeDriverError("UNIQUE constraint failed: ordered_items.order_no, ordered_items.item_no"),
            FakeDriverError("duplicate key value violates unique constraint", sqlstate="23505"),
        ],
    )
    def test_duplicate_keys_are_unique_violations(self, uow, orig):
        assert uow.is_unique_violation(IntegrityError("INSERT", {}, orig))

    @pytest.mark.parametrize(
        "orig",
        [
            FakeDriverError("FOREIGN KEY constraint failed"),
            FakeDriverError("CHECK constraint failed: line_quantity_positive"),
            FakeDriverError("insert violates foreign key constraint", sqlstate="23503"),
            FakeDriverError("new row violates check constraint", sqlstate="23514"),
        ],
    )
    def test_foreign_key_and_check_failures_are_not_duplicates(self, uow, orig):
        assert not uow.is_unique_violation(IntegrityError("INSERT", {}, orig))

    def test_plain_exception_is_not_transient(self, uow):
        assert not uow.is_transient_failure(ValueError("boom"))


class TestStatusMapping:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("ITEM_NOT_FOUND", 404),
            ("ORDER_LINE_NOT_FOUND", 404),
            ("INSUFFICIENT_STOCK", 400),
            ("ORDER_LINE_EXISTS", 400),
            ("INVALID_ORDER", 400),
            ("INVALID_INPUT", 400),
            ("TRANSIENT_STORE_FAILURE", 503),
            ("PLACE_ORDER_LINE_FAILED", 500),
        ],
    )
    def test_status_for(self, code, expected):
        assert status_for(code) == expected
