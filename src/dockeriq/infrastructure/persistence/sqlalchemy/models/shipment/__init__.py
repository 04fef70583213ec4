from dockeriq.infrastructure.persistence.sqlalchemy.models.shipment.shipment_model import (  # NOQA: E501
    ShipmentModel,
)

__all__ = ["ShipmentModel"]
