"""Daily-sequenced tracking number generation."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

from dockeriq.domain.shared.exceptions import ValidationError
from dockeriq.domain.shared.time import utc_now
from dockeriq.domain.shipment.value_objects import tracking_number as tn

if TYPE_CHECKING:
    from dockeriq.domain.shipment import ShipmentRepository

logger = logging.getLogger(__name__)


class TrackingNumberGenerator:
    """
    Mint tracking numbers of the form ``PREFIX + YYYYMMDD + NNNNNN``.

    The next sequence for a day is one more than the highest sequence
    already persisted under the same prefix and day. Nothing is reserved
    between reading the existing numbers and saving the new shipment, so
    two concurrent callers can receive the same number. The unique index
    on ``tracking_number`` rejects the second insert and
    ``ShipmentService`` retries with a fresh number.
    """

    def __init__(
        self,
        shipment_repository: ShipmentRepository,
        prefix: str = tn.DEFAULT_PREFIX,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._shipment_repo = shipment_repository
        self._prefix = prefix
        self._clock = clock or utc_now

    @property
    def prefix(self) -> str:
        return self._prefix

    async def generate(self) -> str:
        return await self.generate_with_prefix(self._prefix)

    async def generate_with_prefix(self, prefix: str) -> str:
        if not prefix:
            msg = "Tracking number prefix cannot be empty"
            raise ValidationError(msg)

        key = tn.day_key(self._clock().date())
        scope = prefix + key
        existing = await self._shipment_repo.find_tracking_numbers_starting_with(
            scope,
        )
        highest = max((tn.parse_sequence(value, scope) for value in existing), default=0)

        tracking_number = tn.format_tracking_number(prefix, key, highest + 1)
        logger.debug("Generated tracking number %s", tracking_number)
        return tracking_number

    @staticmethod
    def validate_format(tracking_number: str | None) -> bool:
        return tn.is_valid_tracking_number(tracking_number)

    @staticmethod
    def extract_date(tracking_number: str | None) -> str:
        """Return the creation day as ``YYYY-MM-DD``.

        Raises
        ------
        InvalidTrackingNumberError
            If the tracking number fails ``validate_format``
        """
        return tn.extract_date(tracking_number)
