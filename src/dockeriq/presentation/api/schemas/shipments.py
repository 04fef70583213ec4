"""Shipment schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BasicInformationSchema(BaseModel):
    shipment_title: str = Field(..., min_length=1, max_length=100)
    destination: str = Field(..., min_length=1, max_length=200)
    barcode: Optional[str] = None
    origin: Optional[str] = None
    carrier: Optional[str] = None
    tracking_number: Optional[str] = Field(
        default=None,
        description="Carrier's own tracking number",
    )
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    dimensions: Optional[float] = None
    dimension_unit: Optional[str] = None
    priority: Optional[str] = None
    estimated_delivery_date: Optional[str] = None


class CreateShipmentRequest(BaseModel):
    """Request schema for creating a shipment.

    The DockerIQ tracking number is generated by the server.
    """

    basic_information: BasicInformationSchema
    customer_fields: dict[str, str] = Field(default_factory=dict)
    image_ids: list[str] = Field(default_factory=list, max_length=10)
    notes: Optional[str] = Field(default=None, max_length=1000)
    device_information: Optional[str] = Field(default=None, max_length=500)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "basic_information": {
                    "shipment_title": "Server rack",
                    "destination": "Hamburg, DE",
                    "carrier": "DHL",
                },
                "customer_fields": {"customer": "ACME"},
                "notes": "Handle with care",
            },
        },
    )


class UpdateShipmentStatusRequest(BaseModel):
    status: str = Field(..., min_length=1, max_length=50)


class ShipmentResponse(BaseModel):
    id: UUID
    tracking_number: str
    basic_information: BasicInformationSchema
    customer_fields: dict[str, str]
    image_ids: list[str]
    notes: Optional[str] = None
    device_information: Optional[str] = None
    status: str
    created_by: str
    last_modified_by: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime


class TrackingDateResponse(BaseModel):
    tracking_number: str
    date: str
