"""Persistence port for user accounts."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from dockeriq.domain.user.aggregates.user import User
from dockeriq.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Stores users keyed by their (lower-case) email.

    Lookups take a raw string as well as an ``Email``; a malformed address
    is not an error, it just matches nobody.
    """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]: ...

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool: ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update.

        Raises ``EmailAlreadyExistsError`` when a new user's email is taken.
        """

    @abstractmethod
    async def delete(self, user: User) -> None: ...

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def list_all(self) -> list[User]:
        """All users ordered by email."""
