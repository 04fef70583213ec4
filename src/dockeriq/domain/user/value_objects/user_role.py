from enum import Enum

from dockeriq.domain.user.exceptions import InvalidRoleError


class UserRole(str, Enum):
    """User roles. Values are the canonical (upper case) role names."""

    SUPERVISOR = "SUPERVISOR"
    WORKER = "WORKER"

    @classmethod
    def parse(cls, value: "str | UserRole") -> "UserRole":
        """Parse a role name case-insensitively into its canonical member."""
        if isinstance(value, UserRole):
            return value
        try:
            return cls(value.strip().upper())
        except (AttributeError, ValueError) as e:
            raise InvalidRoleError(str(value)) from e
