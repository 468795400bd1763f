"""
Main entrypoint for the Minimal API.

This module assembles the FastAPI application.  ``create_app`` takes
a ``Settings`` object (read from the environment when omitted), sets
up logging, builds the token service and the database engine, installs
the route policy interceptor and includes the versioned routers.  Run
it with uvicorn's factory mode, e.g.::

    uvicorn minimal_api.app.main:create_app --factory --reload

Startup fails with ``ConfigurationError`` when ``JWT_SECRET`` is not
set.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import ConfigurationError, Settings
from .core.db import create_db_engine, create_session_factory, init_db
from .core.errors import PayloadValidationError, payload_validation_handler, request_validation_handler
from .core.logging_config import setup_logging
from .core.policy import enforce_policy
from .core.security import TokenService
from .models.administrator import Administrator
from .repositories.administrator_repository import AdministratorRepository
from .schemas.administrator import AdministratorDTO
from .services.administrator_service import AdministratorService
from .services.validation import validate_administrator


logger = logging.getLogger(__name__)


def bootstrap_admin_if_needed(settings: Settings, session_factory) -> Optional[Administrator]:
    """Create the first administrator if the table is empty.

    Controlled by ``BOOTSTRAP_ADMIN_EMAIL`` / ``BOOTSTRAP_ADMIN_PASSWORD``
    (and optionally ``BOOTSTRAP_ADMIN_PROFILE``).  Nothing happens when
    either is unset or administrators already exist.  An invalid seed
    is a configuration error.
    """
    if not settings.bootstrap_admin_email or not settings.bootstrap_admin_password:
        return None
    data = AdministratorDTO(
        email=settings.bootstrap_admin_email,
        password=settings.bootstrap_admin_password,
        profile=settings.bootstrap_admin_profile,
    )
    validation = validate_administrator(data)
    if validation.messages:
        raise ConfigurationError("Invalid bootstrap administrator: " + " ".join(validation.messages))
    with session_factory() as session:
        service = AdministratorService(AdministratorRepository(session))
        if service.count() > 0:
            return None
        administrator = service.create(data)
    logger.info("Bootstrapped administrator %s", administrator.email)
    return administrator


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Explicit configuration.  Defaults to ``Settings.from_env()``.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    # Fails fast when no signing secret is configured.
    token_service = TokenService(settings)
    engine = create_db_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        bootstrap_admin_if_needed(settings, session_factory)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
        dependencies=[Depends(enforce_policy)],
    )
    app.state.settings = settings
    app.state.token_service = token_service
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_exception_handler(PayloadValidationError, payload_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(v1_router)
    return app
