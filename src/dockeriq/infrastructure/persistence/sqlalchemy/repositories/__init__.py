"""SQLAlchemy repository implementations."""

from dockeriq.infrastructure.persistence.sqlalchemy.repositories.shipment import (
    ShipmentRepositorySQLAlchemy,
)
from dockeriq.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "ShipmentRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
