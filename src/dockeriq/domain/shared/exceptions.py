"""Domain error hierarchy.

Every business rule violation raises a ``DomainException`` subclass carrying
an ``ErrorCode``. The API layer maps codes to HTTP statuses in one place
(``presentation.api.exception_handlers``).
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable error codes returned to API clients as ``code``.

    Clients branch on these; do not rename existing members.
    """

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ROLE = "INVALID_ROLE"
    INVALID_TRACKING_NUMBER = "INVALID_TRACKING_NUMBER"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    SHIPMENT_NOT_FOUND = "SHIPMENT_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    DUPLICATE_TRACKING_NUMBER = "DUPLICATE_TRACKING_NUMBER"
    CONCURRENCY_CONFLICT = "CONCURRENCY_CONFLICT"

    # 500
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base for all DockerIQ domain errors.

    Attributes
    ----------
    message
        Text shown to API clients
    code
        Stable ``ErrorCode``; defaults to the subclass's ``default_code``
    details
        Extra context for logs, never sent to clients
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code.value})"


class ValidationError(DomainException):
    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    default_code = ErrorCode.CONFLICT


class ConcurrencyError(DomainException):
    """A write lost against a concurrent request and could not be retried."""

    default_code = ErrorCode.CONCURRENCY_CONFLICT

    def __init__(
        self,
        message: str = "The resource was modified by another request",
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)
