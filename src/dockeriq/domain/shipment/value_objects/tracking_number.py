"""Tracking number format.

A tracking number is ``PREFIX + YYYYMMDD + NNNNNN``: a four letter upper
case prefix, the creation day, and a six digit per-day sequence, e.g.
``DKIQ20240115000001``. Lexical order equals creation order within a prefix.
"""

import re
from datetime import date

from dockeriq.domain.shipment.exceptions import InvalidTrackingNumberError

DEFAULT_PREFIX = "DKIQ"
PREFIX_LENGTH = 4
DAY_KEY_FORMAT = "%Y%m%d"
DAY_KEY_LENGTH = 8
SEQUENCE_DIGITS = 6
MIN_LENGTH = PREFIX_LENGTH + DAY_KEY_LENGTH + SEQUENCE_DIGITS

TRACKING_NUMBER_PATTERN = re.compile(r"^[A-Z]{4}\d{8}\d{6}$")


def day_key(day: date) -> str:
    """Format a date as the 8-digit day-key (``YYYYMMDD``)."""
    return day.strftime(DAY_KEY_FORMAT)


def format_tracking_number(prefix: str, key: str, sequence: int) -> str:
    return f"{prefix}{key}{sequence:0{SEQUENCE_DIGITS}d}"


def parse_sequence(tracking_number: str, scope: str) -> int:
    """Return the sequence following ``scope`` (prefix + day-key).

    Anything that does not parse as a non-negative integer counts as 0.
    """
    suffix = tracking_number[len(scope) :]
    if not (suffix.isascii() and suffix.isdigit()):
        return 0
    return int(suffix)


def is_valid_tracking_number(tracking_number: str | None) -> bool:
    if tracking_number is None or len(tracking_number) < MIN_LENGTH:
        return False
    return TRACKING_NUMBER_PATTERN.match(tracking_number) is not None


def extract_date(tracking_number: str | None) -> str:
    """Return the creation day of a tracking number as ``YYYY-MM-DD``.

    Raises
    ------
    InvalidTrackingNumberError
        If the tracking number is not well formed
    """
    if not is_valid_tracking_number(tracking_number):
        raise InvalidTrackingNumberError(tracking_number)

    key = tracking_number[PREFIX_LENGTH : PREFIX_LENGTH + DAY_KEY_LENGTH]
    return f"{key[0:4]}-{key[4:6]}-{key[6:8]}"
