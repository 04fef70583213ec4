"""Authentication router for login and token validation."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Header, status

from dockeriq.application.services import LoginFailure
from dockeriq.presentation.api.dependencies import AuthService, JWTServiceDep
from dockeriq.presentation.api.exception_handlers import ApiError
from dockeriq.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    TokenValidationResponse,
)
from dockeriq_auth import extract_bearer_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    summary="Login with email and password",
    response_model=LoginResponse,
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Invalid email or password"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns a signed access token bound to the user's current role.
    Unknown emails, inactive accounts and wrong passwords all get the same
    400 answer.
    """
    outcome = await auth_service.authenticate(request.email, request.password)
    if isinstance(outcome, LoginFailure):
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="Bad Request",
            message=outcome.message,
        )

    return LoginResponse(
        token=outcome.token,
        email=outcome.email,
        role=outcome.role,
        first_name=outcome.first_name,
        last_name=outcome.last_name,
    )


@router.get(
    "/validate",
    summary="Check whether a token is valid",
    responses={
        200: {"description": "Validation result"},
        400: {"description": "Missing or malformed Authorization header"},
    },
)
async def validate_token(
    jwt_service: JWTServiceDep,
    authorization: Annotated[Optional[str], Header()] = None,
) -> TokenValidationResponse:
    """
    Report whether the bearer token is well formed, correctly signed and
    not expired. The user behind the token is not consulted.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        logger.warning("Invalid token format provided")
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="Bad Request",
            message="Invalid token",
        )

    return TokenValidationResponse(valid=jwt_service.is_valid(token))
