"""Authentication service for login and password encoding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from dockeriq_auth import JWTService, PasswordHashingService

if TYPE_CHECKING:
    from dockeriq.domain.user import User, UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginFailureKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INACTIVE = "INACTIVE"
    BAD_PASSWORD = "BAD_PASSWORD"


@dataclass(frozen=True)
class LoginResult:
    token: str
    email: str
    role: str
    first_name: Optional[str]
    last_name: Optional[str]


@dataclass(frozen=True)
class LoginFailure:
    """Why a login was refused.

    The kind is kept for logging only. Callers show every kind to the
    client as the same generic message.
    """

    kind: LoginFailureKind
    message: str = INVALID_CREDENTIALS_MESSAGE


LoginOutcome = Union[LoginResult, LoginFailure]


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the generic dockeriq_auth infrastructure (password hashing,
    JWT tokens) and the User aggregate:
    - Login with email and password
    - Idempotent password encoding before a user is stored
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def authenticate(self, email: str, password: str) -> LoginOutcome:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.info("Login refused for %s: unknown email", email)
            return LoginFailure(LoginFailureKind.NOT_FOUND)

        if not user.is_active:
            logger.info("Login refused for %s: account inactive", email)
            return LoginFailure(LoginFailureKind.INACTIVE)

        if not self._password_service.verify(password, user.password):
            logger.info("Login refused for %s: bad password", email)
            return LoginFailure(LoginFailureKind.BAD_PASSWORD)

        token = self._jwt_service.create_access_token(user.email, user.role.value)

        logger.info("User logged in: %s", user.email)
        return LoginResult(
            token=token,
            email=user.email,
            role=user.role.value,
            first_name=user.first_name,
            last_name=user.last_name,
        )

    def encode_password(self, user: User) -> None:
        """Hash the user's password unless it already is a bcrypt hash.

        Raises
        ------
        WeakPasswordError
            If a plaintext password does not meet the strength requirements
        """
        if self._password_service.is_hashed(user.password):
            return
        user.set_password(self._password_service.hash(user.password))
