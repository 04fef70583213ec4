"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from dockeriq.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class InvalidRoleError(ValidationError):
    """Raised when a role name is not one of the known roles."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Invalid role: {role}", code=ErrorCode.INVALID_ROLE)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already exists: {email}",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"User not found with email: {email}",
            code=ErrorCode.USER_NOT_FOUND,
        )
