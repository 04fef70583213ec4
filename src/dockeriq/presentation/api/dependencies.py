"""FastAPI dependency injection for the DockerIQ API.

Provides dependencies for:
- Database sessions
- The authenticated principal and role checks
- Service instances

Long-lived collaborators (settings, JWT service, password service, session
maker) are created once by ``create_app`` and read from ``app.state``.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from dockeriq.application.services import (
    AuthenticationService,
    ShipmentService,
    TrackingNumberGenerator,
    UserService,
)
from dockeriq.domain.user import UserRole
from dockeriq.infrastructure.persistence.sqlalchemy.repositories import (
    ShipmentRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from dockeriq.presentation.api.exception_handlers import (
    ACCESS_DENIED,
    AUTHENTICATION_ERROR,
    ApiError,
)
from dockeriq_auth import AuthenticatedPrincipal, JWTService, PasswordHashingService
from dockeriq_config.settings import Settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the shared session maker.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Current Principal
# -----------------------------------------------------------------------------


def get_current_principal(request: Request) -> AuthenticatedPrincipal:
    """
    Return the principal established by ``AuthenticationMiddleware``.

    Raises
    ------
    ApiError
        401 if the request carried no bearer token
    """
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise ApiError(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error=AUTHENTICATION_ERROR,
            message="Authentication required",
        )
    return principal


CurrentPrincipal = Annotated[AuthenticatedPrincipal, Depends(get_current_principal)]


def require_supervisor(principal: CurrentPrincipal) -> AuthenticatedPrincipal:
    """Require the ``ROLE_SUPERVISOR`` authority."""
    if not principal.has_role(UserRole.SUPERVISOR.value):
        raise ApiError(
            status_code=status.HTTP_403_FORBIDDEN,
            error=ACCESS_DENIED,
            message="Insufficient privileges - Supervisor role required",
        )
    return principal


SupervisorPrincipal = Annotated[AuthenticatedPrincipal, Depends(require_supervisor)]


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


def get_user_service(session: DBSession, auth_service: AuthService) -> UserService:
    return UserService(
        user_repository=UserRepositorySQLAlchemy(session),
        authentication_service=auth_service,
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def get_tracking_number_generator(
    session: DBSession,
    settings: SettingsDep,
) -> TrackingNumberGenerator:
    return TrackingNumberGenerator(
        shipment_repository=ShipmentRepositorySQLAlchemy(session),
        prefix=settings.tracking_number_prefix,
    )


TrackingNumberGeneratorDep = Annotated[
    TrackingNumberGenerator,
    Depends(get_tracking_number_generator),
]


def get_shipment_service(
    session: DBSession,
    generator: TrackingNumberGeneratorDep,
) -> ShipmentService:
    return ShipmentService(
        shipment_repository=ShipmentRepositorySQLAlchemy(session),
        tracking_number_generator=generator,
    )


ShipmentServiceDep = Annotated[ShipmentService, Depends(get_shipment_service)]
