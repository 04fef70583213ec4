from dockeriq.application.services.authentication_service import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthenticationService,
    LoginFailure,
    LoginFailureKind,
    LoginOutcome,
    LoginResult,
)
from dockeriq.application.services.shipment_service import ShipmentService
from dockeriq.application.services.tracking_number_generator import (
    TrackingNumberGenerator,
)
from dockeriq.application.services.user_service import UserService

__all__ = [
    "INVALID_CREDENTIALS_MESSAGE",
    "AuthenticationService",
    "LoginFailure",
    "LoginFailureKind",
    "LoginOutcome",
    "LoginResult",
    "ShipmentService",
    "TrackingNumberGenerator",
    "UserService",
]
