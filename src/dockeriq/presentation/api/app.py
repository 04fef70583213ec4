"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dockeriq.application.services import AuthenticationService, UserService
from dockeriq.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
)
from dockeriq.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from dockeriq.presentation.api.exception_handlers import setup_exception_handlers
from dockeriq.presentation.api.middleware import AuthenticationMiddleware
from dockeriq.presentation.api.routers import (
    auth_router,
    shipments_router,
    users_router,
)
from dockeriq_auth import JWTService, PasswordHashingService, RequestAuthenticator
from dockeriq_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for dockeriq modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("dockeriq").setLevel(log_level)
    logging.getLogger("dockeriq_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login and token validation.

- Login with email and password to obtain a JWT (valid 60 minutes by default)
- Send it as `Authorization: Bearer <token>` on every other request
- The token's role must match the user's current role, and the account
  must be active, or the request is refused
""",
    },
    {
        "name": "Users",
        "description": "User account management. Supervisors only.",
    },
    {
        "name": "Shipments",
        "description": """Shipments and tracking numbers.

Tracking numbers look like `DKIQ20240115000001`: a four letter prefix,
the creation day and a per-day sequence.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


def _build_jwt_service(settings: Settings) -> JWTService:
    secret_key = settings.jwt_secret_key.get_secret_value()
    if not secret_key:
        logger.warning(
            "JWT_SECRET_KEY is not set, using a random key. "
            "Tokens will not survive a restart.",
        )
        secret_key = JWTService.generate_secret_key()

    return JWTService(
        secret_key=secret_key,
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
    )


async def _bootstrap_supervisor(app: FastAPI) -> None:
    """Create the initial supervisor if the user table is empty."""
    settings: Settings = app.state.settings
    if not settings.bootstrap_supervisor_enabled:
        return

    async with app.state.session_maker() as session:
        user_repo = UserRepositorySQLAlchemy(session)
        auth_service = AuthenticationService(
            user_repository=user_repo,
            password_service=app.state.password_service,
            jwt_service=app.state.jwt_service,
        )
        user_service = UserService(user_repo, auth_service)
        created = await user_service.ensure_initial_supervisor(
            email=settings.bootstrap_supervisor_email,
            password=settings.bootstrap_supervisor_password.get_secret_value(),
            first_name=settings.bootstrap_supervisor_first_name,
            last_name=settings.bootstrap_supervisor_last_name,
        )
        if created is not None:
            await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting DockerIQ API v%s...", API_VERSION)
    engine = app.state.engine
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    await _bootstrap_supervisor(app)
    yield

    logger.info("Shutting down DockerIQ API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Shipment tracking and user management backend.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    engine = create_engine(settings.database_url)
    jwt_service = _build_jwt_service(settings)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    app.state.jwt_service = jwt_service
    app.state.password_service = PasswordHashingService()
    app.state.authenticator = RequestAuthenticator(jwt_service)

    # Added last, so CORS wraps authentication and preflights are answered first
    app.add_middleware(AuthenticationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    app.include_router(users_router, prefix="/users", tags=["Users"])
    app.include_router(shipments_router, prefix="/shipments", tags=["Shipments"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Returns service status and version info.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app
