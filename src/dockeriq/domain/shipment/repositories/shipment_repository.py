"""Shipment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from dockeriq.domain.shipment.aggregates.shipment import Shipment


class ShipmentRepository(ABC):
    """Repository interface for Shipment aggregates."""

    @abstractmethod
    async def find_by_id(self, shipment_id: UUID) -> Optional[Shipment]:
        """Find a shipment by its ID."""

    @abstractmethod
    async def find_by_tracking_number(self, tracking_number: str) -> Optional[Shipment]:
        """Find a shipment by its tracking number."""

    @abstractmethod
    async def exists_by_tracking_number(self, tracking_number: str) -> bool:
        """Check if a shipment exists with the given tracking number."""

    @abstractmethod
    async def find_tracking_numbers_starting_with(self, prefix: str) -> list[str]:
        """Return every stored tracking number that starts with ``prefix``."""

    @abstractmethod
    async def save(self, shipment: Shipment) -> None:
        """Save or update a shipment.

        Raises
        ------
        DuplicateTrackingNumberError
            If a different shipment already holds the tracking number
        """

    @abstractmethod
    async def delete(self, shipment: Shipment) -> None:
        """Delete a shipment."""

    @abstractmethod
    async def list_all(self) -> list[Shipment]:
        """List all shipments, oldest first."""
