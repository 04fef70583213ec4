"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from dockeriq_auth.schemas import (
    TokenClaims,
    TokenFailure,
    TokenFailureKind,
    TokenVerificationResult,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class JWTService:
    """Service for JWT token creation and verification.

    Tokens carry the identity's email as subject and its role as a custom
    ``role`` claim. The signing key is fixed for the lifetime of the
    instance; the application creates one instance at startup and shares it.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token("user@example.com", "WORKER")
    >>> claims = service.verify_token(token)
    >>> print(claims.subject, claims.role)
    """

    DEFAULT_ACCESS_EXPIRE_MINUTES = 60
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_minutes: int = DEFAULT_ACCESS_EXPIRE_MINUTES,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_minutes
            Minutes until an access token expires (default 60)
        clock
            Source of the current time used for ``iat``/``exp`` at issuance.
            Defaults to the system UTC clock.
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(minutes=access_token_expire_minutes)
        self._clock = clock or _utc_now

    @staticmethod
    def generate_secret_key() -> str:
        """Generate a random signing key suitable for HS256."""
        return secrets.token_urlsafe(64)

    @property
    def access_token_expire(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        email: str,
        role: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        email
            The identity's email address, stored as ``sub``
        role
            The identity's current role, stored as ``role``
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = self._clock()
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": email,
            "role": role,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenVerificationResult:
        """Verify and decode a JWT token.

        Never raises for an invalid token: the failure is returned as a
        ``TokenFailure`` so the caller decides how to respond.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        ``TokenClaims`` on success, ``TokenFailure`` otherwise
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            return TokenFailure(TokenFailureKind.EXPIRED, "JWT token has expired")
        except jwt.InvalidSignatureError:
            return TokenFailure(TokenFailureKind.BAD_SIGNATURE, "Invalid JWT signature")
        except jwt.InvalidTokenError as e:
            logger.debug("Token could not be decoded: %s", e)
            return TokenFailure(TokenFailureKind.MALFORMED, "Invalid JWT token format")

        subject = payload.get("sub")
        role = payload.get("role")
        if not isinstance(subject, str) or not isinstance(role, str):
            return TokenFailure(TokenFailureKind.MALFORMED, "Invalid JWT token format")

        try:
            issued_at = datetime.fromtimestamp(payload["iat"], tz=timezone.utc)
            expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        except (TypeError, ValueError, OverflowError):
            return TokenFailure(TokenFailureKind.MALFORMED, "Invalid JWT token format")

        return TokenClaims(
            subject=subject,
            role=role,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def is_valid(self, token: str) -> bool:
        """Check signature and expiry only; the identity is not consulted."""
        return isinstance(self.verify_token(token), TokenClaims)
