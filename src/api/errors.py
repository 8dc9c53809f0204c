"""
Exception handlers - Map domain errors onto HTTP responses.

Every error body has the shape ``{"error": "<message>"}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import (
    ConflictError,
    EscrowError,
    FraudBlockedError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[EscrowError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    FraudBlockedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidStateError: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: EscrowError) -> int:
    """HTTP status for a domain error, walking the class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_400_BAD_REQUEST


async def escrow_error_handler(request: Request, exc: EscrowError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer request-body validation failures with a 400 error body."""
    logger.info("%s %s -> 400 malformed request: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request body"})


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EscrowError, escrow_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
