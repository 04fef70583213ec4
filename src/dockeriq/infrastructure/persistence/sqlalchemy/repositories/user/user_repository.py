"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dockeriq.domain.shared.time import ensure_tz_aware
from dockeriq.domain.user import Email, EmailAlreadyExistsError, User, UserRepository
from dockeriq.domain.user.value_objects.email import normalize_email
from dockeriq.infrastructure.persistence.sqlalchemy.models.user import UserModel

logger = logging.getLogger(__name__)


def _normalize_email(email: Union[str, Email]) -> str:
    # Lookups never validate, an unknown or malformed address simply finds nothing
    if isinstance(email, Email):
        return email.value
    return normalize_email(email)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        model = await self._find_model_by_email(_normalize_email(email))
        if model is None:
            return None
        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == _normalize_email(email))
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, user: User):
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.debug("Created user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete(self, user: User):
        model = await self._find_model_by_id(user.id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted user: %s", user.id)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.email)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _find_model_by_email(self, email: str) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password=model.password,
            role=model.role,
            active=model.active,
            password_reset=model.password_reset,
            first_name=model.first_name,
            last_name=model.last_name,
            address=model.address,
            phone_number=model.phone_number,
            created_by=model.created_by,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password=user.password,
            role=user.role.value,
            active=user.is_active,
            password_reset=user.password_reset,
            first_name=user.first_name,
            last_name=user.last_name,
            address=user.address,
            phone_number=user.phone_number,
            created_by=user.created_by,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User):
        # id never changes
        model.email = user.email
        model.password = user.password
        model.role = user.role.value
        model.active = user.is_active
        model.password_reset = user.password_reset
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.address = user.address
        model.phone_number = user.phone_number
        model.updated_at = user.updated_at
