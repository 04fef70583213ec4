"""Shipment domain exceptions."""

from dockeriq.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidTrackingNumberError(ValidationError):
    """Raised when a tracking number does not have the expected shape."""

    def __init__(self, tracking_number: str | None) -> None:
        self.tracking_number = tracking_number
        super().__init__(
            "Invalid tracking number format",
            code=ErrorCode.INVALID_TRACKING_NUMBER,
            details={"tracking_number": tracking_number},
        )


class DuplicateTrackingNumberError(ConflictError):
    """Raised by persistence when a tracking number is already taken."""

    def __init__(self, tracking_number: str) -> None:
        self.tracking_number = tracking_number
        super().__init__(
            f"Tracking number already exists: {tracking_number}",
            code=ErrorCode.DUPLICATE_TRACKING_NUMBER,
        )


class ShipmentNotFoundError(EntityNotFoundError):
    """Shipment not found by id or tracking number."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.SHIPMENT_NOT_FOUND)
