"""Shipment router."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from dockeriq.domain.shipment import BasicInformation, Shipment
from dockeriq.presentation.api.dependencies import (
    CurrentPrincipal,
    DBSession,
    ShipmentServiceDep,
    TrackingNumberGeneratorDep,
    get_current_principal,
)
from dockeriq.presentation.api.schemas.shipments import (
    BasicInformationSchema,
    CreateShipmentRequest,
    ShipmentResponse,
    TrackingDateResponse,
    UpdateShipmentStatusRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_principal)])


def _to_response(shipment: Shipment) -> ShipmentResponse:
    return ShipmentResponse(
        id=shipment.id,
        tracking_number=shipment.tracking_number,
        basic_information=BasicInformationSchema(
            **shipment.basic_information.to_dict(),
        ),
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


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a shipment",
    responses={
        201: {"description": "Shipment created with a new tracking number"},
        400: {"description": "Invalid shipment data"},
        409: {"description": "No unique tracking number could be allocated"},
    },
)
async def create_shipment(
    request: CreateShipmentRequest,
    principal: CurrentPrincipal,
    shipment_service: ShipmentServiceDep,
    session: DBSession,
) -> ShipmentResponse:
    shipment = await shipment_service.create_shipment(
        basic_information=BasicInformation(**request.basic_information.model_dump()),
        created_by=principal.email,
        customer_fields=request.customer_fields,
        image_ids=request.image_ids,
        notes=request.notes,
        device_information=request.device_information,
    )
    await session.commit()
    return _to_response(shipment)


@router.get("", summary="List all shipments")
async def list_shipments(shipment_service: ShipmentServiceDep) -> list[ShipmentResponse]:
    shipments = await shipment_service.list_all()
    return [_to_response(shipment) for shipment in shipments]


@router.get(
    "/tracking/{tracking_number}",
    summary="Get a shipment by tracking number",
    responses={404: {"description": "Shipment not found"}},
)
async def get_shipment_by_tracking_number(
    tracking_number: str,
    shipment_service: ShipmentServiceDep,
) -> ShipmentResponse:
    return _to_response(
        await shipment_service.get_by_tracking_number(tracking_number),
    )


@router.get(
    "/tracking/{tracking_number}/date",
    summary="Get the creation day encoded in a tracking number",
    responses={400: {"description": "Invalid tracking number format"}},
)
async def get_tracking_number_date(
    tracking_number: str,
    generator: TrackingNumberGeneratorDep,
) -> TrackingDateResponse:
    return TrackingDateResponse(
        tracking_number=tracking_number,
        date=generator.extract_date(tracking_number),
    )


@router.get(
    "/{shipment_id}",
    summary="Get a shipment by id",
    responses={404: {"description": "Shipment not found"}},
)
async def get_shipment(
    shipment_id: UUID,
    shipment_service: ShipmentServiceDep,
) -> ShipmentResponse:
    return _to_response(await shipment_service.get_by_id(shipment_id))


@router.put(
    "/{shipment_id}/status",
    summary="Update a shipment's status",
    responses={404: {"description": "Shipment not found"}},
)
async def update_shipment_status(
    shipment_id: UUID,
    request: UpdateShipmentStatusRequest,
    principal: CurrentPrincipal,
    shipment_service: ShipmentServiceDep,
    session: DBSession,
) -> ShipmentResponse:
    shipment = await shipment_service.update_status(
        shipment_id,
        request.status,
        updated_by=principal.email,
    )
    await session.commit()
    return _to_response(shipment)


@router.delete(
    "/{shipment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a shipment",
    responses={404: {"description": "Shipment not found"}},
)
async def delete_shipment(
    shipment_id: UUID,
    shipment_service: ShipmentServiceDep,
    session: DBSession,
) -> None:
    await shipment_service.delete(shipment_id)
    await session.commit()
