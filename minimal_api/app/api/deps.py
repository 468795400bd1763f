"""
FastAPI dependencies that assemble services for a request.

Each service gets a repository bound to the request's ORM session.
The page size comes from the application settings.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from minimal_api.app.core.db import get_session
from minimal_api.app.repositories import AdministratorRepository, VehicleRepository
from minimal_api.app.services.administrator_service import AdministratorService
from minimal_api.app.services.vehicle_service import VehicleService


def get_administrator_service(request: Request, session: Session = Depends(get_session)) -> AdministratorService:
    return AdministratorService(AdministratorRepository(session, request.app.state.settings.page_size))


def get_vehicle_service(request: Request, session: Session = Depends(get_session)) -> VehicleService:
    return VehicleService(VehicleRepository(session, request.app.state.settings.page_size))
