"""Login email of a DockerIQ user."""

import re
from dataclasses import dataclass

from dockeriq.domain.user.exceptions import InvalidEmailError

# local@domain.tld, no whitespace
_ADDRESS = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


def normalize_email(value: str) -> str:
    """Lower-case and strip an address without validating it."""
    return value.strip().lower()


@dataclass(frozen=True)
class Email:
    """A user's login address, stored lower-case.

    Two spellings of the same address (``Dana@Example.com`` and
    ``dana@example.com``) are one identity.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise InvalidEmailError("Email cannot be empty")

        address = normalize_email(self.value)
        if not _ADDRESS.match(address):
            raise InvalidEmailError(f"Invalid email format: {self.value}")

        object.__setattr__(self, "value", address)

    def __str__(self) -> str:
        return self.value
