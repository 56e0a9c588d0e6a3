"""Unit of Work Interface

Transaction boundary shared by the repositories of one use case.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Unit of Work - commit or roll back all repository writes together

    Repositories flush into the session owned by the unit of work;
    nothing is durable until commit().

    The store-specific failure checks let use cases tell a retryable
    lock/deadlock failure or a duplicate key apart from other faults
    without importing the persistence library.
    """

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    def is_transient_failure(self, exc: Exception) -> bool:
        return False

    def is_unique_violation(self, exc: Exception) -> bool:
        return False
