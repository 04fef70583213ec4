from dockeriq.domain.shipment.repositories.shipment_repository import (
    ShipmentRepository,
)

__all__ = ["ShipmentRepository"]
