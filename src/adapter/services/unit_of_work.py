"""SQLAlchemy implementation of UnitOfWork

Wraps the request-scoped AsyncSession and classifies driver errors.
"""

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork

# serialization_failure, deadlock_detected, lock_not_available, query_canceled
TRANSIENT_SQLSTATES = {"40001", "40P01", "55P03", "57014"}

# unique_violation (primary keys included)
UNIQUE_VIOLATION_SQLSTATE = "23505"


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

    def is_transient_failure(self, exc: Exception) -> bool:
        if not isinstance(exc, DBAPIError):
            return False
        if exc.connection_invalidated:
            return True

        orig = exc.orig
        sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        if sqlstate in TRANSIENT_SQLSTATES:
            return True

        # SQLite reports busy-timeout expiry as "database is locked"
        return isinstance(exc, OperationalError) and "locked" in str(orig).lower()

    def is_unique_violation(self, exc: Exception) -> bool:
        """Duplicate primary or unique key; FK and CHECK violations are not duplicates"""
        if not isinstance(exc, IntegrityError):
            return False

        orig = exc.orig
        sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        if sqlstate:
            return sqlstate == UNIQUE_VIOLATION_SQLSTATE

        # SQLite: "UNIQUE constraint failed: table.column"
        return "unique constraint" in str(orig).lower()
