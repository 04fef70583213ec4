"""Authentication services.

Provides password hashing, JWT token management and bearer-token request
authentication.
"""

from dockeriq_auth.services.jwt_service import JWTService
from dockeriq_auth.services.password_service import PasswordHashingService
from dockeriq_auth.services.request_authenticator import (
    IdentityLookup,
    RequestAuthenticator,
    extract_bearer_token,
)

__all__ = [
    "PasswordHashingService",
    "JWTService",
    "IdentityLookup",
    "RequestAuthenticator",
    "extract_bearer_token",
]
