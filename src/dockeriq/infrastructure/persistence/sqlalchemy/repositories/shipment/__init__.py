from dockeriq.infrastructure.persistence.sqlalchemy.repositories.shipment.shipment_repository import (  # NOQA: E501
    ShipmentRepositorySQLAlchemy,
)

__all__ = ["ShipmentRepositorySQLAlchemy"]
