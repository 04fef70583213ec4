"""User management service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from dockeriq.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRole,
)

if TYPE_CHECKING:
    from dockeriq.application.services.authentication_service import (
        AuthenticationService,
    )
    from dockeriq.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for supervisors managing user accounts.

    Passwords are always encoded through the authentication service before a
    user is stored, so plaintext never reaches the repository.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        authentication_service: AuthenticationService,
    ):
        self._user_repo = user_repository
        self._auth_service = authentication_service

    async def list_users(self) -> list[User]:
        return await self._user_repo.list_all()

    async def get_user(self, email: str) -> User:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def create_user(  # NOQA: PLR0913
        self,
        email: str,
        password: str,
        role: Union[str, UserRole] = UserRole.WORKER,
        active: bool = True,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        address: Optional[str] = None,
        phone_number: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> User:
        """Create a user account.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is already registered
        WeakPasswordError
            If the password does not meet the strength requirements
        """
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        user = User.create(
            email=email,
            password=password,
            role=role,
            active=active,
            first_name=first_name,
            last_name=last_name,
            address=address,
            phone_number=phone_number,
            created_by=created_by,
        )
        self._auth_service.encode_password(user)
        await self._user_repo.save(user)

        logger.info("User created: %s (role: %s)", user.email, user.role.value)
        return user

    async def update_user(  # NOQA: PLR0913
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        address: Optional[str] = None,
        phone_number: Optional[str] = None,
        role: Union[str, UserRole, None] = None,
        active: Optional[bool] = None,
    ) -> User:
        """Replace profile fields and optionally change role or active flag.

        Tokens already issued keep their old role claim and are refused by
        request authentication once the role changes.
        """
        user = await self.get_user(email)
        user.update_profile(
            first_name=first_name,
            last_name=last_name,
            address=address,
            phone_number=phone_number,
        )
        if role is not None:
            user.change_role(role)
        if active is True:
            user.activate()
        elif active is False:
            user.deactivate()

        await self._user_repo.save(user)
        logger.info("User updated: %s", user.email)
        return user

    async def delete_user(self, email: str) -> None:
        user = await self.get_user(email)
        await self._user_repo.delete(user)
        logger.info("User deleted: %s", user.email)

    async def ensure_initial_supervisor(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> Optional[User]:
        """Seed a supervisor account when no user exists yet."""
        if await self._user_repo.count() > 0:
            logger.debug("Users already present, skipping supervisor bootstrap")
            return None

        user = await self.create_user(
            email=email,
            password=password,
            role=UserRole.SUPERVISOR,
            first_name=first_name,
            last_name=last_name,
            created_by="system",
        )
        logger.warning(
            "Created initial supervisor %s, change its password after first login",
            user.email,
        )
        return user
