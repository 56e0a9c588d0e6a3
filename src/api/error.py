"""API error mapping

Turns use case Errors into JSON responses of the form
{"error": {"code": ..., "message": ..., "reason": ..., "details": ...}}.
"""

import logging
from typing import Optional
from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error
from src.app.use_cases.failures import TRANSIENT_STORE_FAILURE

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Raised by routes when a use case returns an error Result"""

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for(error.code)


def status_for(code: str) -> int:
    """
    Default HTTP status for an error code

    *_NOT_FOUND -> 404, TRANSIENT_STORE_FAILURE -> 503, *_FAILED -> 500,
    every other business rejection -> 400.
    """
    if code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if code == TRANSIENT_STORE_FAILURE:
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if code.endswith("_FAILED"):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    body = {"code": exc.error.code, "message": exc.error.message}

    if exc.status_code >= 500:
        # Reason may carry driver text; log it, keep it out of the response
        logger.error(f"{request.method} {request.url.path} failed: {exc.error.code} {exc.error.reason}")
    elif exc.error.reason:
        body["reason"] = exc.error.reason

    if exc.error.details:
        body["details"] = exc.error.details

    headers = {"Retry-After": "1"} if exc.status_code == status.HTTP_503_SERVICE_UNAVAILABLE else None
    return JSONResponse(status_code=exc.status_code, content={"error": body}, headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal Server Error"}},
    )
