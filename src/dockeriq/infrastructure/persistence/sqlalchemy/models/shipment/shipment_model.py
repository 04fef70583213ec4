"""SQLAlchemy model for Shipment aggregate."""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from dockeriq.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ShipmentModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting Shipment aggregates.

    The unique index on tracking_number is what rejects a number handed
    out twice by concurrent generators. Basic information, customer fields,
    image ids and tags are stored as JSON.

    Table: shipments
    """

    __tablename__ = "shipments"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    tracking_number: Mapped[str] = mapped_column(
        String(32),
        unique=True,
        nullable=False,
        index=True,
    )
    basic_information: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    customer_fields: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=True,
    )
    image_ids: Mapped[Optional[list[Any]]] = mapped_column(JSON, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    device_information: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)
    last_modified_by: Mapped[str] = mapped_column(String(255), nullable=False)
    tags: Mapped[Optional[list[Any]]] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<ShipmentModel(id={self.id}, "
            f"tracking_number={self.tracking_number}, status={self.status})>"
        )
