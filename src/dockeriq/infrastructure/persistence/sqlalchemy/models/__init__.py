"""SQLAlchemy models for persistence layer."""

from dockeriq.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from dockeriq.infrastructure.persistence.sqlalchemy.models.shipment import (
    ShipmentModel,
)
from dockeriq.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = [
    "Base",
    "TimestampMixin",
    "ShipmentModel",
    "UserModel",
]
