"""Authentication middleware: bearer token to request principal."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from dockeriq.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from dockeriq.presentation.api.exception_handlers import (
    AUTHENTICATION_ERROR,
    create_error_response,
)
from dockeriq_auth import AuthenticationFailure, extract_bearer_token

logger = logging.getLogger(__name__)

# Reachable without a principal; a bearer header sent here is not checked
PUBLIC_PATH_PREFIXES = ("/auth/", "/health", "/docs", "/redoc", "/openapi.json")


def is_public_path(path: str) -> bool:
    return path.startswith(PUBLIC_PATH_PREFIXES)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Resolves the bearer token of every protected request.

    Sets ``request.state.principal`` to the ``AuthenticatedPrincipal`` or to
    ``None`` when no bearer token was sent. A token that fails verification,
    names an unknown user, carries a stale role or belongs to an inactive
    account ends the request here with 401/403.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.principal = None

        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is None or is_public_path(request.url.path):
            return await call_next(request)

        authenticator = request.app.state.authenticator
        async with request.app.state.session_maker() as session:
            result = await authenticator.authenticate(
                token,
                UserRepositorySQLAlchemy(session),
            )

        if isinstance(result, AuthenticationFailure):
            return self._reject(result)

        request.state.principal = result
        return await call_next(request)

    @staticmethod
    def _reject(failure: AuthenticationFailure) -> JSONResponse:
        return create_error_response(
            status_code=failure.status_code,
            error=AUTHENTICATION_ERROR,
            message=failure.message,
        )
