"""Bearer-token request authentication.

Turns a raw bearer token into an ``AuthenticatedPrincipal`` or an
``AuthenticationFailure``. The role claim is never trusted on its own: it is
compared against the identity's current role, and the identity's active
flag is checked, on every call.
"""

import logging
from enum import Enum
from typing import Optional, Protocol

from dockeriq_auth.schemas import (
    AuthenticatedPrincipal,
    AuthenticationFailure,
    AuthenticationFailureKind,
    RequestAuthenticationResult,
    TokenFailure,
    authority_for_role,
)
from dockeriq_auth.services.jwt_service import JWTService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

HTTP_401_UNAUTHORIZED = 401
HTTP_403_FORBIDDEN = 403


class Identity(Protocol):
    """The subset of a stored identity the authenticator reads."""

    @property
    def email(self) -> str: ...

    @property
    def role(self) -> object: ...

    @property
    def is_active(self) -> bool: ...


class IdentityLookup(Protocol):
    """Looks up a stored identity by its email address."""

    async def find_by_email(self, email: str) -> Optional[Identity]: ...


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token of an ``Authorization: Bearer`` header, if any."""
    if authorization is None or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX) :]


def _role_name(role: object) -> str:
    if isinstance(role, Enum):
        return str(role.value)
    return "" if role is None else str(role)


class RequestAuthenticator:
    """Authenticates a single request from its bearer token.

    Stateless apart from the injected collaborators; safe to share between
    concurrent requests as long as each call gets a lookup bound to its own
    database session.
    """

    def __init__(self, jwt_service: JWTService):
        self._jwt_service = jwt_service

    async def authenticate(
        self,
        token: str,
        identities: IdentityLookup,
    ) -> RequestAuthenticationResult:
        """Validate ``token`` and resolve it against the live identity.

        Parameters
        ----------
        token
            Raw JWT (without the ``Bearer`` prefix)
        identities
            Lookup used to load the identity named by the token subject

        Returns
        -------
        ``AuthenticatedPrincipal`` or ``AuthenticationFailure``
        """
        claims = self._jwt_service.verify_token(token)
        if isinstance(claims, TokenFailure):
            logger.warning("Rejected bearer token (%s)", claims.kind.value)
            return AuthenticationFailure(
                kind=AuthenticationFailureKind.INVALID_TOKEN,
                status_code=HTTP_401_UNAUTHORIZED,
                message=claims.message,
            )

        identity = await identities.find_by_email(claims.subject)
        if identity is None:
            logger.warning("User not found for token subject: %s", claims.subject)
            return AuthenticationFailure(
                kind=AuthenticationFailureKind.USER_NOT_FOUND,
                status_code=HTTP_401_UNAUTHORIZED,
                message="User not found",
            )

        current_role = _role_name(identity.role)
        if not current_role or current_role != claims.role:
            logger.warning(
                "Role claim %r does not match current role %r for %s",
                claims.role,
                current_role,
                claims.subject,
            )
            return AuthenticationFailure(
                kind=AuthenticationFailureKind.ROLE_MISMATCH,
                status_code=HTTP_403_FORBIDDEN,
                message="Role is null or empty or does not match",
            )

        if not identity.is_active:
            logger.warning("Token presented for inactive user: %s", claims.subject)
            return AuthenticationFailure(
                kind=AuthenticationFailureKind.INACTIVE_ACCOUNT,
                status_code=HTTP_403_FORBIDDEN,
                message="User account is inactive",
            )

        logger.debug("Authenticated %s with role %s", claims.subject, current_role)
        return AuthenticatedPrincipal(
            email=claims.subject,
            role=current_role,
            authorities=(authority_for_role(current_role),),
        )
