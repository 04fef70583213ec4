"""Basic shipment information value object."""

from dataclasses import asdict, dataclass
from typing import Any, Optional

from dockeriq.domain.shared.exceptions import ValidationError

MAX_TITLE_LENGTH = 100
MAX_DESTINATION_LENGTH = 200


@dataclass(frozen=True)
class BasicInformation:
    """What is shipped and where it goes."""

    shipment_title: str
    destination: str
    barcode: Optional[str] = None
    origin: Optional[str] = None
    carrier: Optional[str] = None
    tracking_number: Optional[str] = None  # carrier's own tracking number
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    dimensions: Optional[float] = None
    dimension_unit: Optional[str] = None
    priority: Optional[str] = None
    estimated_delivery_date: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.shipment_title or not self.shipment_title.strip():
            msg = "Shipment title is required"
            raise ValidationError(msg)
        if len(self.shipment_title) > MAX_TITLE_LENGTH:
            msg = f"Shipment title cannot exceed {MAX_TITLE_LENGTH} characters"
            raise ValidationError(msg)
        if not self.destination or not self.destination.strip():
            msg = "Destination is required"
            raise ValidationError(msg)
        if len(self.destination) > MAX_DESTINATION_LENGTH:
            msg = f"Destination cannot exceed {MAX_DESTINATION_LENGTH} characters"
            raise ValidationError(msg)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BasicInformation":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)
