"""Auth schemas and data structures.

These are simple data classes used for transferring authentication
data between components. Verification outcomes are modelled as
``Success | Failure`` unions instead of exceptions so callers have to
handle each failure kind explicitly.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Union


class TokenFailureKind(str, Enum):
    """Reasons a session token can fail verification."""

    MALFORMED = "malformed"
    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TokenClaims:
    """Decoded and verified JWT claims.

    Attributes
    ----------
    subject
        The identity's email address (``sub`` claim)
    role
        The role claim bound to the token at issuance time
    issued_at
        Token issuance timestamp (``iat`` claim)
    expires_at
        Token expiration timestamp (``exp`` claim)
    """

    subject: str
    role: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=timezone.utc) >= self.expires_at


@dataclass(frozen=True)
class TokenFailure:
    """A token that could not be verified."""

    kind: TokenFailureKind
    message: str


TokenVerificationResult = Union[TokenClaims, TokenFailure]


class AuthenticationFailureKind(str, Enum):
    """Reasons a bearer token is rejected at the request boundary."""

    INVALID_TOKEN = "invalid_token"
    USER_NOT_FOUND = "user_not_found"
    ROLE_MISMATCH = "role_mismatch"
    INACTIVE_ACCOUNT = "inactive_account"


@dataclass(frozen=True)
class AuthenticationFailure:
    """A rejected request, with the HTTP status it maps to."""

    kind: AuthenticationFailureKind
    status_code: int
    message: str


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """The identity established for a single request."""

    email: str
    role: str
    authorities: tuple[str, ...] = field(default_factory=tuple)

    def has_authority(self, authority: str) -> bool:
        return authority in self.authorities

    def has_role(self, role: str) -> bool:
        return self.has_authority(authority_for_role(role))


RequestAuthenticationResult = Union[AuthenticatedPrincipal, AuthenticationFailure]


def authority_for_role(role: str) -> str:
    """Map a role name to its granted authority (``ROLE_<ROLE>``)."""
    return f"ROLE_{role.upper()}"
