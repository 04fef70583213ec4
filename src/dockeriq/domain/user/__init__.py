"""User domain: identities, roles and the user repository contract."""

from dockeriq.domain.user.aggregates import User
from dockeriq.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidRoleError,
    UserNotFoundError,
)
from dockeriq.domain.user.repositories import UserRepository
from dockeriq.domain.user.value_objects import Email, UserRole

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidRoleError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
