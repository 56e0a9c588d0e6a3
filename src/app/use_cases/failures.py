"""Shared mapping from unexpected exceptions to use case errors"""

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork

TRANSIENT_STORE_FAILURE = "TRANSIENT_STORE_FAILURE"


def store_failure(uow: UnitOfWork, exc: Exception, code: str, message: str) -> Error:
    """
    Build the Error returned after a rolled-back transaction

    Lock timeouts, deadlocks and serialization failures become
    TRANSIENT_STORE_FAILURE so the caller can retry the whole operation.
    """
    if uow.is_transient_failure(exc):
        return Error(
            code=TRANSIENT_STORE_FAILURE,
            message="Store temporarily unavailable, retry the operation",
            reason=str(exc),
        )
    return Error(code=code, message=message, reason=str(exc))
