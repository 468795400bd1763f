"""
Administrator endpoints for API v1.

Login is anonymous; every other route requires an ``Admin`` token (see
``core.policy``).  Responses use ``AdministratorMV`` so the stored
password is never returned.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from minimal_api.app.api.deps import get_administrator_service
from minimal_api.app.core.errors import PayloadValidationError
from minimal_api.app.schemas.administrator import (
    AdministratorDTO,
    AdministratorLogged,
    AdministratorMV,
    ErrorAdministrator,
    LoginDTO,
)
from minimal_api.app.services.administrator_service import AdministratorService
from minimal_api.app.services.validation import EMAIL_TAKEN, validate_administrator


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/administrators/login", response_model=AdministratorLogged)
def login(
    credentials: LoginDTO,
    request: Request,
    service: AdministratorService = Depends(get_administrator_service),
) -> AdministratorLogged:
    """Exchange an email/password pair for a bearer token."""
    administrator = service.login(credentials)
    if administrator is None:
        logger.warning("Failed login for %s", credentials.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid_credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = request.app.state.token_service.issue(administrator)
    return AdministratorLogged(email=administrator.email, profile=administrator.profile, token=token)


@router.post(
    "/administrators",
    response_model=AdministratorMV,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorAdministrator}},
)
def create_administrator(
    data: AdministratorDTO,
    response: Response,
    service: AdministratorService = Depends(get_administrator_service),
) -> AdministratorMV:
    """Register an administrator.

    All validation problems are reported together in a 400 body.  The
    email must not already belong to another administrator.
    """
    validation = validate_administrator(data)
    if not validation.messages and service.email_taken(data.email):
        validation.messages.append(EMAIL_TAKEN)
    if validation.messages:
        raise PayloadValidationError(validation)

    administrator = service.create(data)
    response.headers["Location"] = f"/administrator/{administrator.id}"
    return AdministratorMV.model_validate(administrator)


@router.get("/administrators", response_model=List[AdministratorMV])
def list_administrators(
    page: Optional[int] = Query(None, ge=1, description="1-based page; omit to list all"),
    service: AdministratorService = Depends(get_administrator_service),
) -> List[AdministratorMV]:
    return [AdministratorMV.model_validate(a) for a in service.list(page)]


@router.get("/administrator/{id}", response_model=AdministratorMV)
def get_administrator(
    id: int,
    service: AdministratorService = Depends(get_administrator_service),
) -> AdministratorMV:
    try:
        return AdministratorMV.model_validate(service.get(id))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/administrator/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_administrator(
    id: int,
    service: AdministratorService = Depends(get_administrator_service),
) -> None:
    try:
        service.delete(id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
