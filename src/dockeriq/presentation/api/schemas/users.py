"""User management schemas."""

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

RoleName = Literal["SUPERVISOR", "WORKER"]


class CreateUserRequest(BaseModel):
    """Request schema for creating a user account."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        description="Password (8-72 characters)",
    )
    role: RoleName = "WORKER"
    active: bool = True
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None, max_length=500)
    phone_number: Optional[str] = Field(default=None, max_length=50)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "worker@dockeriq.local",
                "password": "securepassword123",
                "role": "WORKER",
                "first_name": "Dana",
                "last_name": "Doe",
            },
        },
    )


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user.

    Profile fields are replaced as a whole. ``role`` and ``active`` are only
    changed when present.
    """

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None, max_length=500)
    phone_number: Optional[str] = Field(default=None, max_length=50)
    role: Optional[RoleName] = None
    active: Optional[bool] = None


class UserResponse(BaseModel):
    """User account as returned by the API (never includes the password)."""

    id: UUID
    email: str
    role: str
    active: bool
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime
