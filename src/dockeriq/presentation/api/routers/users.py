"""User management router (supervisors only)."""

import logging

from fastapi import APIRouter, Depends, status

from dockeriq.domain.user import User
from dockeriq.presentation.api.dependencies import (
    DBSession,
    SupervisorPrincipal,
    UserServiceDep,
    require_supervisor,
)
from dockeriq.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_supervisor)])


def _to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        role=user.role.value,
        active=user.is_active,
        first_name=user.first_name,
        last_name=user.last_name,
        address=user.address,
        phone_number=user.phone_number,
        created_by=user.created_by,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.get("", summary="List all users")
async def list_users(user_service: UserServiceDep) -> list[UserResponse]:
    users = await user_service.list_users()
    return [_to_response(user) for user in users]


@router.get(
    "/{email}",
    summary="Get a user by email",
    responses={404: {"description": "User not found"}},
)
async def get_user(email: str, user_service: UserServiceDep) -> UserResponse:
    return _to_response(await user_service.get_user(email))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created"},
        400: {"description": "Weak password or invalid role"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(
    request: CreateUserRequest,
    principal: SupervisorPrincipal,
    user_service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    user = await user_service.create_user(
        email=request.email,
        password=request.password,
        role=request.role,
        active=request.active,
        first_name=request.first_name,
        last_name=request.last_name,
        address=request.address,
        phone_number=request.phone_number,
        created_by=principal.email,
    )
    await session.commit()
    return _to_response(user)


@router.put(
    "/{email}",
    summary="Update a user",
    responses={404: {"description": "User not found"}},
)
async def update_user(
    email: str,
    request: UpdateUserRequest,
    user_service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Replace the profile fields and optionally change role and active flag.

    Tokens issued before a role change are rejected from then on.
    """
    user = await user_service.update_user(
        email,
        first_name=request.first_name,
        last_name=request.last_name,
        address=request.address,
        phone_number=request.phone_number,
        role=request.role,
        active=request.active,
    )
    await session.commit()
    return _to_response(user)


@router.delete(
    "/{email}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={404: {"description": "User not found"}},
)
async def delete_user(
    email: str,
    user_service: UserServiceDep,
    session: DBSession,
) -> None:
    await user_service.delete_user(email)
    await session.commit()
