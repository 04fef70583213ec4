from dockeriq.domain.shipment.value_objects.basic_information import BasicInformation
from dockeriq.domain.shipment.value_objects.tracking_number import (
    DEFAULT_PREFIX,
    day_key,
    extract_date,
    format_tracking_number,
    is_valid_tracking_number,
    parse_sequence,
)

__all__ = [
    "BasicInformation",
    "DEFAULT_PREFIX",
    "day_key",
    "extract_date",
    "format_tracking_number",
    "is_valid_tracking_number",
    "parse_sequence",
]
