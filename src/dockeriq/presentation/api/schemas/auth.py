"""Authentication schemas for request/response models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request schema for user login.

    The email is not validated here; an unknown or malformed address gets
    the same answer as a wrong password.
    """

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "supervisor@dockeriq.local",
                "password": "securepassword123",
            },
        },
    )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    token: str
    email: str
    role: str
    first_name: Optional[str] = Field(default=None, serialization_alias="firstName")
    last_name: Optional[str] = Field(default=None, serialization_alias="lastName")


class TokenValidationResponse(BaseModel):
    valid: bool
