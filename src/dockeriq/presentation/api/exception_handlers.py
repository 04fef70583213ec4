"""Error responses of the DockerIQ API.

Authentication failures, authorization failures and domain exceptions all
leave the API with the same JSON body.

Error Response Format:
    {
        "timestamp": "2024-01-15T10:30:00+00:00",
        "status": 404,
        "error": "Not Found",
        "message": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"    (domain exceptions only)
    }

Usage:
    from dockeriq.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dockeriq.domain.shared.exceptions import (
    ConcurrencyError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from dockeriq.domain.shared.time import utc_now
from dockeriq_auth import WeakPasswordError

logger = logging.getLogger(__name__)

AUTHENTICATION_ERROR = "Authentication Error"
ACCESS_DENIED = "Access Denied"


class ApiError(Exception):
    """An error response raised from routers and dependencies.

    ``error`` is the short category shown to clients (for example
    ``"Authentication Error"``), ``message`` the detail.
    """

    def __init__(self, status_code: int, error: str, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.message = message


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ROLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TRACKING_NUMBER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SHIPMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_TRACKING_NUMBER: status.HTTP_409_CONFLICT,
    ErrorCode.CONCURRENCY_CONFLICT: status.HTTP_409_CONFLICT,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    # Codes without an explicit mapping fall back on the exception class
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (ConflictError, ConcurrencyError)):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_400_BAD_REQUEST


def error_body(status_code: int, error: str, message: str) -> dict[str, Any]:
    """Build the error body shared by every error response."""
    return {
        "timestamp": utc_now().isoformat(),
        "status": status_code,
        "error": error,
        "message": message,
    }


def create_error_response(
    status_code: int,
    error: str,
    message: str,
    code: str | None = None,
) -> JSONResponse:
    content = error_body(status_code, error, message)
    if code is not None:
        content["code"] = code
    return JSONResponse(status_code=status_code, content=content)


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that render every error with ``error_body``."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.warning(
            "%s on %s %s: %s",
            exc.error,
            request.method,
            request.url.path,
            exc.message,
        )
        return create_error_response(exc.status_code, exc.error, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return create_error_response(
            status_code=status_code,
            error=HTTPStatus(status_code).phrase,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(WeakPasswordError)
    async def weak_password_handler(
        request: Request,
        exc: WeakPasswordError,
    ) -> JSONResponse:
        logger.info(
            "Weak password rejected on %s %s",
            request.method,
            request.url.path,
        )
        return create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            error=HTTPStatus.BAD_REQUEST.phrase,
            message=exc.message,
            code=ErrorCode.WEAK_PASSWORD.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
