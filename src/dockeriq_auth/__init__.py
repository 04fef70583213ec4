"""DockerIQ Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the shipment and user domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification
- Bearer-token request authentication with live role/active checks

Architecture:
    dockeriq_auth/
    ├── services/           # Pure logic (password hashing, JWT, authenticator)
    ├── schemas.py          # Data classes and typed verification results
    └── exceptions.py       # Auth exceptions

Usage:
    from dockeriq_auth import JWTService, PasswordHashingService

    jwt_service = JWTService(secret_key="...")
    token = jwt_service.create_access_token("user@example.com", "WORKER")
"""

from dockeriq_auth.exceptions import AuthError, WeakPasswordError
from dockeriq_auth.schemas import (
    AuthenticatedPrincipal,
    AuthenticationFailure,
    AuthenticationFailureKind,
    TokenClaims,
    TokenFailure,
    TokenFailureKind,
    authority_for_role,
)
from dockeriq_auth.services import (
    IdentityLookup,
    JWTService,
    PasswordHashingService,
    RequestAuthenticator,
    extract_bearer_token,
)

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    "RequestAuthenticator",
    "IdentityLookup",
    "extract_bearer_token",
    # Schemas
    "TokenClaims",
    "TokenFailure",
    "TokenFailureKind",
    "AuthenticatedPrincipal",
    "AuthenticationFailure",
    "AuthenticationFailureKind",
    "authority_for_role",
    # Exceptions
    "AuthError",
    "WeakPasswordError",
]
