"""Shared test fixtures and builders."""

from tests.shared.fixtures.factories import (
    JAN_15_2024,
    FixedClock,
    make_basic_information,
    make_shipment,
    make_user,
)

__all__ = [
    "JAN_15_2024",
    "FixedClock",
    "make_basic_information",
    "make_shipment",
    "make_user",
]
