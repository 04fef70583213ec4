from dockeriq.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    TokenValidationResponse,
)
from dockeriq.presentation.api.schemas.shipments import (
    BasicInformationSchema,
    CreateShipmentRequest,
    ShipmentResponse,
    TrackingDateResponse,
    UpdateShipmentStatusRequest,
)
from dockeriq.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "BasicInformationSchema",
    "CreateShipmentRequest",
    "CreateUserRequest",
    "LoginRequest",
    "LoginResponse",
    "ShipmentResponse",
    "TokenValidationResponse",
    "TrackingDateResponse",
    "UpdateShipmentStatusRequest",
    "UpdateUserRequest",
    "UserResponse",
]
