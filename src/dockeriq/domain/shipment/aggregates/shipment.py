"""Shipment aggregate."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from dockeriq.domain.shared.exceptions import ValidationError
from dockeriq.domain.shared.time import utc_now
from dockeriq.domain.shipment.value_objects import BasicInformation

STATUS_CREATED = "CREATED"

MAX_IMAGES = 10
MAX_NOTES_LENGTH = 1000
MAX_DEVICE_INFORMATION_LENGTH = 500


class Shipment:
    """
    Shipment aggregate root.

    The tracking number is assigned once, at creation, and never changes.
    """

    def __init__(  # NOQA: PLR0913
        self,
        tracking_number: str,
        basic_information: BasicInformation,
        created_by: str,
        customer_fields: Optional[dict[str, str]] = None,
        image_ids: Optional[list[str]] = None,
        notes: Optional[str] = None,
        device_information: Optional[str] = None,
        status: str = STATUS_CREATED,
        last_modified_by: Optional[str] = None,
        tags: Optional[list[str]] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._tracking_number = tracking_number
        self._basic_information = basic_information
        self._customer_fields = dict(customer_fields or {})
        self._image_ids = list(image_ids or [])
        self._notes = notes
        self._device_information = device_information
        self._status = status
        self._created_by = created_by
        self._last_modified_by = last_modified_by or created_by
        self._tags = list(tags or [])
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def tracking_number(self) -> str:
        return self._tracking_number

    @property
    def basic_information(self) -> BasicInformation:
        return self._basic_information

    @property
    def customer_fields(self) -> dict[str, str]:
        return dict(self._customer_fields)

    @property
    def image_ids(self) -> list[str]:
        return list(self._image_ids)

    @property
    def notes(self) -> Optional[str]:
        return self._notes

    @property
    def device_information(self) -> Optional[str]:
        return self._device_information

    @property
    def status(self) -> str:
        return self._status

    @property
    def created_by(self) -> str:
        return self._created_by

    @property
    def last_modified_by(self) -> str:
        return self._last_modified_by

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_status(self, status: str, updated_by: str) -> None:
        status = status.strip() if status else ""
        if not status:
            msg = "Status cannot be empty"
            raise ValidationError(msg)
        self._status = status
        self._last_modified_by = updated_by
        self._updated_at = utc_now()

    def reassign_tracking_number(self, tracking_number: str) -> None:
        """Replace a tracking number that lost a uniqueness race before saving."""
        self._tracking_number = tracking_number

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        tracking_number: str,
        basic_information: BasicInformation,
        created_by: str,
        customer_fields: Optional[dict[str, str]] = None,
        image_ids: Optional[list[str]] = None,
        notes: Optional[str] = None,
        device_information: Optional[str] = None,
    ) -> "Shipment":
        if image_ids and len(image_ids) > MAX_IMAGES:
            msg = f"Maximum {MAX_IMAGES} images allowed"
            raise ValidationError(msg)
        if notes and len(notes) > MAX_NOTES_LENGTH:
            msg = f"Notes cannot exceed {MAX_NOTES_LENGTH} characters"
            raise ValidationError(msg)
        if device_information and len(device_information) > MAX_DEVICE_INFORMATION_LENGTH:
            msg = (
                "Device information cannot exceed "
                f"{MAX_DEVICE_INFORMATION_LENGTH} characters"
            )
            raise ValidationError(msg)

        return cls(
            tracking_number=tracking_number,
            basic_information=basic_information,
            created_by=created_by,
            customer_fields=customer_fields,
            image_ids=image_ids,
            notes=notes,
            device_information=device_information,
            status=STATUS_CREATED,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shipment):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Shipment(id={self._id}, tracking_number={self._tracking_number})"
