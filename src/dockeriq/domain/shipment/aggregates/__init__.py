from dockeriq.domain.shipment.aggregates.shipment import STATUS_CREATED, Shipment

__all__ = ["STATUS_CREATED", "Shipment"]
