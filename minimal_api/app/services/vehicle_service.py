"""
Business logic for vehicles.

``VehicleService`` wraps ``VehicleRepository``.  Lookups of unknown
identifiers raise ``ValueError`` (translated to 404 by the handlers).
Name and brand filters are case-insensitive substring matches and
accept the same optional 1-based ``page`` as the plain listing.
"""

import logging
from typing import List, Optional

from ..models.vehicle import Vehicle
from ..repositories.vehicle_repository import VehicleRepository
from ..schemas.vehicle import VehicleDTO


logger = logging.getLogger(__name__)


class VehicleService:
    """Operations on vehicles."""

    def __init__(self, repository: VehicleRepository) -> None:
        self.repository = repository

    def create(self, data: VehicleDTO) -> Vehicle:
        vehicle = self.repository.create(Vehicle(name=data.name, brand=data.brand, year=data.year))
        logger.info("Created vehicle %s (%s %s)", vehicle.id, vehicle.brand, vehicle.name)
        return vehicle

    def get(self, vehicle_id: int) -> Vehicle:
        vehicle = self.repository.get(vehicle_id)
        if vehicle is None:
            raise ValueError(f"Vehicle {vehicle_id} not found")
        return vehicle

    def list(self, page: Optional[int] = None) -> List[Vehicle]:
        return self.repository.list(page)

    def list_by_name(self, name: str, page: Optional[int] = None) -> List[Vehicle]:
        return self.repository.list_by_name(name, page)

    def list_by_brand(self, brand: str, page: Optional[int] = None) -> List[Vehicle]:
        return self.repository.list_by_brand(brand, page)

    def update(self, vehicle: Vehicle, data: VehicleDTO) -> Vehicle:
        """Overwrite ``vehicle`` with a validated payload and persist it."""
        vehicle.name = data.name
        vehicle.brand = data.brand
        vehicle.year = data.year
        vehicle = self.repository.update(vehicle)
        logger.info("Updated vehicle %s", vehicle.id)
        return vehicle

    def delete(self, vehicle_id: int) -> None:
        vehicle = self.get(vehicle_id)
        self.repository.delete(vehicle)
        logger.info("Deleted vehicle %s", vehicle_id)
