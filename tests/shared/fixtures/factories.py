"""Factories for domain objects used across test modules."""

from datetime import datetime, timezone
from typing import Optional

from dockeriq.domain.shipment import BasicInformation, Shipment
from dockeriq.domain.user import User, UserRole


class FixedClock:
    """A callable clock returning a settable instant."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_user(
    email: str = "worker@example.com",
    password: str = "plain-password",
    role: UserRole = UserRole.WORKER,
    active: bool = True,
    first_name: Optional[str] = "Dana",
    last_name: Optional[str] = "Doe",
) -> User:
    return User.create(
        email=email,
        password=password,
        role=role,
        active=active,
        first_name=first_name,
        last_name=last_name,
    )


def make_basic_information(
    shipment_title: str = "Server rack",
    destination: str = "Hamburg, DE",
) -> BasicInformation:
    return BasicInformation(
        shipment_title=shipment_title,
        destination=destination,
        carrier="DHL",
    )


def make_shipment(
    tracking_number: str = "DKIQ20240115000001",
    created_by: str = "worker@example.com",
) -> Shipment:
    return Shipment.create(
        tracking_number=tracking_number,
        basic_information=make_basic_information(),
        created_by=created_by,
    )


JAN_15_2024 = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
