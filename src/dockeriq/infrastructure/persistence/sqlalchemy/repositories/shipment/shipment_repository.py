"""SQLAlchemy implementation of ShipmentRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dockeriq.domain.shared.time import ensure_tz_aware
from dockeriq.domain.shipment import (
    BasicInformation,
    DuplicateTrackingNumberError,
    Shipment,
    ShipmentRepository,
)
from dockeriq.infrastructure.persistence.sqlalchemy.models.shipment import (
    ShipmentModel,
)

logger = logging.getLogger(__name__)


class ShipmentRepositorySQLAlchemy(ShipmentRepository):
    """SQLAlchemy implementation of the ShipmentRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, shipment_id: UUID) -> Optional[Shipment]:
        model = await self._find_model_by_id(shipment_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_tracking_number(self, tracking_number: str) -> Optional[Shipment]:
        stmt = select(ShipmentModel).where(
            ShipmentModel.tracking_number == tracking_number,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_tracking_number(self, tracking_number: str) -> bool:
        stmt = select(ShipmentModel.id).where(
            ShipmentModel.tracking_number == tracking_number,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_tracking_numbers_starting_with(self, prefix: str) -> list[str]:
        stmt = select(ShipmentModel.tracking_number).where(
            ShipmentModel.tracking_number.startswith(prefix, autoescape=True),
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, shipment: Shipment):
        """Insert or update a shipment.

        A rejected insert rolls back the session's transaction so the caller
        can retry with another tracking number on the same session.
        """
        existing = await self._find_model_by_id(shipment.id)

        if existing:
            self._update_model(existing, shipment)
            await self._session.flush()
            logger.debug("Updated shipment: %s", shipment.id)
            return

        self._session.add(self._map_to_model(shipment))
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateTrackingNumberError(shipment.tracking_number) from e
        logger.debug(
            "Created shipment: %s (tracking number: %s)",
            shipment.id,
            shipment.tracking_number,
        )

    async def delete(self, shipment: Shipment):
        model = await self._find_model_by_id(shipment.id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted shipment: %s", shipment.id)

    async def list_all(self) -> list[Shipment]:
        stmt = select(ShipmentModel).order_by(
            ShipmentModel.created_at,
            ShipmentModel.tracking_number,
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, shipment_id: UUID) -> Optional[ShipmentModel]:
        stmt = select(ShipmentModel).where(ShipmentModel.id == shipment_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ShipmentModel) -> Shipment:
        return Shipment(
            id=model.id,
            tracking_number=model.tracking_number,
            basic_information=BasicInformation.from_dict(model.basic_information),
            customer_fields=model.customer_fields,
            image_ids=model.image_ids,
            notes=model.notes,
            device_information=model.device_information,
            status=model.status,
            created_by=model.created_by,
            last_modified_by=model.last_modified_by,
            tags=model.tags,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, shipment: Shipment) -> ShipmentModel:
        return ShipmentModel(
            id=shipment.id,
            tracking_number=shipment.tracking_number,
            basic_information=shipment.basic_information.to_dict(),
            customer_fields=shipment.customer_fields,
            image_ids=shipment.image_ids,
            notes=shipment.notes,
            device_information=shipment.device_information,
            status=shipment.status,
            created_by=shipment.created_by,
            last_modified_by=shipment.last_modified_by,
            tags=shipment.tags,
            created_at=shipment.created_at,
            updated_at=shipment.updated_at,
        )

    def _update_model(self, model: ShipmentModel, shipment: Shipment):
        # id and tracking_number never change once stored
        model.basic_information = shipment.basic_information.to_dict()
        model.customer_fields = shipment.customer_fields
        model.image_ids = shipment.image_ids
        model.notes = shipment.notes
        model.device_information = shipment.device_information
        model.status = shipment.status
        model.last_modified_by = shipment.last_modified_by
        model.tags = shipment.tags
        model.updated_at = shipment.updated_at
