"""
Vehicle endpoints for API v1.

Create, read and list routes accept ``Admin`` or ``Editor`` tokens;
update and delete are ``Admin`` only (see ``core.policy``).  Listing
routes take an optional 1-based ``page`` query parameter.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from minimal_api.app.api.deps import get_vehicle_service
from minimal_api.app.core.errors import PayloadValidationError
from minimal_api.app.core.security import get_current_claims
from minimal_api.app.schemas.vehicle import ErrorVehicle, VehicleDTO, VehicleRead
from minimal_api.app.services.validation import validate_vehicle
from minimal_api.app.services.vehicle_service import VehicleService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/vehicles",
    response_model=VehicleRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorVehicle}},
)
def create_vehicle(
    data: VehicleDTO,
    response: Response,
    service: VehicleService = Depends(get_vehicle_service),
    claims: Dict[str, Any] = Depends(get_current_claims),
) -> VehicleRead:
    validation = validate_vehicle(data)
    if validation.messages:
        raise PayloadValidationError(validation)
    vehicle = service.create(data)
    logger.info("Vehicle %s created by %s", vehicle.id, claims.get("email"))
    response.headers["Location"] = f"/vehicle/{vehicle.id}"
    return VehicleRead.model_validate(vehicle)


@router.get("/vehicles", response_model=List[VehicleRead])
def list_vehicles(
    page: Optional[int] = Query(None, ge=1, description="1-based page; omit to list all"),
    service: VehicleService = Depends(get_vehicle_service),
) -> List[VehicleRead]:
    return [VehicleRead.model_validate(v) for v in service.list(page)]


@router.get("/vehicle/{id}", response_model=VehicleRead)
def get_vehicle(
    id: int,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleRead:
    try:
        return VehicleRead.model_validate(service.get(id))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/vehiclesName/{name}", response_model=List[VehicleRead])
def list_vehicles_by_name(
    name: str,
    page: Optional[int] = Query(None, ge=1, description="1-based page; omit to list all"),
    service: VehicleService = Depends(get_vehicle_service),
) -> List[VehicleRead]:
    return [VehicleRead.model_validate(v) for v in service.list_by_name(name, page)]


@router.get("/vehiclesBrand/{brand}", response_model=List[VehicleRead])
def list_vehicles_by_brand(
    brand: str,
    page: Optional[int] = Query(None, ge=1, description="1-based page; omit to list all"),
    service: VehicleService = Depends(get_vehicle_service),
) -> List[VehicleRead]:
    return [VehicleRead.model_validate(v) for v in service.list_by_brand(brand, page)]


@router.put("/vehicle/{id}", response_model=VehicleRead, responses={400: {"model": ErrorVehicle}})
def update_vehicle(
    id: int,
    data: VehicleDTO,
    service: VehicleService = Depends(get_vehicle_service),
) -> VehicleRead:
    """Replace a vehicle's fields.

    The vehicle is looked up first, so an unknown id yields 404 even
    when the payload is invalid.
    """
    try:
        vehicle = service.get(id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    validation = validate_vehicle(data)
    if validation.messages:
        raise PayloadValidationError(validation)
    return VehicleRead.model_validate(service.update(vehicle, data))


@router.delete("/vehicle/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vehicle(
    id: int,
    service: VehicleService = Depends(get_vehicle_service),
) -> None:
    try:
        service.delete(id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
