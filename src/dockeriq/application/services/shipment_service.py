"""Shipment management service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from dockeriq.domain.shared.exceptions import ConcurrencyError
from dockeriq.domain.shipment import (
    BasicInformation,
    DuplicateTrackingNumberError,
    Shipment,
    ShipmentNotFoundError,
)

if TYPE_CHECKING:
    from dockeriq.application.services.tracking_number_generator import (
        TrackingNumberGenerator,
    )
    from dockeriq.domain.shipment import ShipmentRepository

logger = logging.getLogger(__name__)

MAX_CREATE_ATTEMPTS = 3


class ShipmentService:
    """Create, look up, update and delete shipments."""

    def __init__(
        self,
        shipment_repository: ShipmentRepository,
        tracking_number_generator: TrackingNumberGenerator,
        max_create_attempts: int = MAX_CREATE_ATTEMPTS,
    ):
        self._shipment_repo = shipment_repository
        self._generator = tracking_number_generator
        self._max_create_attempts = max_create_attempts

    async def create_shipment(  # NOQA: PLR0913
        self,
        basic_information: BasicInformation,
        created_by: str,
        customer_fields: Optional[dict[str, str]] = None,
        image_ids: Optional[list[str]] = None,
        notes: Optional[str] = None,
        device_information: Optional[str] = None,
    ) -> Shipment:
        """Create a shipment with a freshly generated tracking number.

        A tracking number taken by a concurrent request between generation
        and insert is regenerated, up to ``max_create_attempts`` times.

        Raises
        ------
        ValidationError
            If the shipment data is invalid
        ConcurrencyError
            If every attempt collided with another request
        """
        shipment = Shipment.create(
            tracking_number=await self._generator.generate(),
            basic_information=basic_information,
            created_by=created_by,
            customer_fields=customer_fields,
            image_ids=image_ids,
            notes=notes,
            device_information=device_information,
        )

        for attempt in range(1, self._max_create_attempts + 1):
            try:
                await self._shipment_repo.save(shipment)
            except DuplicateTrackingNumberError:
                logger.warning(
                    "Tracking number %s already taken (attempt %d of %d)",
                    shipment.tracking_number,
                    attempt,
                    self._max_create_attempts,
                )
                if attempt == self._max_create_attempts:
                    break
                shipment.reassign_tracking_number(await self._generator.generate())
            else:
                logger.info(
                    "Created shipment %s by %s",
                    shipment.tracking_number,
                    created_by,
                )
                return shipment

        msg = "Could not allocate a unique tracking number, please retry"
        raise ConcurrencyError(
            msg,
            details={"attempts": self._max_create_attempts},
        )

    async def get_by_id(self, shipment_id: UUID) -> Shipment:
        shipment = await self._shipment_repo.find_by_id(shipment_id)
        if shipment is None:
            msg = f"Shipment not found with id: {shipment_id}"
            raise ShipmentNotFoundError(msg)
        return shipment

    async def get_by_tracking_number(self, tracking_number: str) -> Shipment:
        shipment = await self._shipment_repo.find_by_tracking_number(tracking_number)
        if shipment is None:
            msg = f"Shipment not found with tracking number: {tracking_number}"
            raise ShipmentNotFoundError(msg)
        return shipment

    async def list_all(self) -> list[Shipment]:
        return await self._shipment_repo.list_all()

    async def update_status(
        self,
        shipment_id: UUID,
        status: str,
        updated_by: str,
    ) -> Shipment:
        shipment = await self.get_by_id(shipment_id)
        shipment.update_status(status, updated_by)
        await self._shipment_repo.save(shipment)
        logger.info(
            "Shipment %s status changed to %s by %s",
            shipment.tracking_number,
            shipment.status,
            updated_by,
        )
        return shipment

    async def delete(self, shipment_id: UUID) -> None:
        shipment = await self.get_by_id(shipment_id)
        await self._shipment_repo.delete(shipment)
        logger.info("Deleted shipment %s", shipment.tracking_number)

