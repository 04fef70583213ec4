"""User aggregate: identity, credentials and profile."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from dockeriq.domain.shared.time import utc_now
from dockeriq.domain.user.value_objects import Email, UserRole


class User:
    """
    User aggregate root.

    ``password`` holds a bcrypt hash once the user has been persisted. A
    freshly created user may carry the plaintext password until the
    authentication service encodes it.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        password: str,
        role: Union[str, UserRole] = UserRole.WORKER,
        active: bool = True,
        password_reset: bool = False,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        address: Optional[str] = None,
        phone_number: Optional[str] = None,
        created_by: Optional[str] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._password = password
        self._role = UserRole.parse(role)
        self._active = active
        self._password_reset = password_reset
        self._first_name = first_name
        self._last_name = last_name
        self._address = address
        self._phone_number = phone_number
        self._created_by = created_by
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password(self) -> str:
        return self._password

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_supervisor(self) -> bool:
        return self._role == UserRole.SUPERVISOR

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def password_reset(self) -> bool:
        return self._password_reset

    @property
    def first_name(self) -> Optional[str]:
        return self._first_name

    @property
    def last_name(self) -> Optional[str]:
        return self._last_name

    @property
    def address(self) -> Optional[str]:
        return self._address

    @property
    def phone_number(self) -> Optional[str]:
        return self._phone_number

    @property
    def created_by(self) -> Optional[str]:
        return self._created_by

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def set_password(self, password: str) -> None:
        self._password = password
        self._updated_at = utc_now()

    def change_role(self, role: Union[str, UserRole]) -> None:
        self._role = UserRole.parse(role)
        self._updated_at = utc_now()

    def activate(self) -> None:
        self._active = True
        self._updated_at = utc_now()

    def deactivate(self) -> None:
        self._active = False
        self._updated_at = utc_now()

    def update_profile(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        address: Optional[str] = None,
        phone_number: Optional[str] = None,
    ) -> None:
        """Replace the profile fields (all four, like a PUT)."""
        self._first_name = first_name
        self._last_name = last_name
        self._address = address
        self._phone_number = phone_number
        self._updated_at = utc_now()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        email: Union[str, Email],
        password: str,
        role: Union[str, UserRole] = UserRole.WORKER,
        active: bool = True,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        address: Optional[str] = None,
        phone_number: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> "User":
        return cls(
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

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
