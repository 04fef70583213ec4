"""Shipment domain: shipments, tracking numbers and the repository contract."""

from dockeriq.domain.shipment.aggregates import STATUS_CREATED, Shipment
from dockeriq.domain.shipment.exceptions import (
    DuplicateTrackingNumberError,
    InvalidTrackingNumberError,
    ShipmentNotFoundError,
)
from dockeriq.domain.shipment.repositories import ShipmentRepository
from dockeriq.domain.shipment.value_objects import BasicInformation

__all__ = [
    "STATUS_CREATED",
    "BasicInformation",
    "DuplicateTrackingNumberError",
    "InvalidTrackingNumberError",
    "Shipment",
    "ShipmentNotFoundError",
    "ShipmentRepository",
]
