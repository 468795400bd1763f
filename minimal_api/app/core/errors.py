"""
Error types rendered by application-level exception handlers.

``PayloadValidationError`` carries the collect-all validation result
(``ErrorAdministrator`` or ``ErrorVehicle``) and is turned into an HTTP
400 response whose body is that object, e.g.
``{"messages": ["Name must not be empty."]}``.

Request bodies that cannot be parsed into a DTO at all (wrong JSON
types, a body that is not an object) get the same 400 shape from
``request_validation_handler``.  Errors in path or query parameters
keep FastAPI's default 422 response.
"""

from fastapi import Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class PayloadValidationError(Exception):
    def __init__(self, error: BaseModel) -> None:
        super().__init__(error)
        self.error = error


async def payload_validation_handler(request: Request, exc: PayloadValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.error.model_dump())


def _body_message(error: dict) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())[1:])
    return f"{field}: {error.get('msg')}" if field else f"Request body: {error.get('msg')}"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors and all(e.get("loc", ())[:1] == ("body",) for e in errors):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"messages": [_body_message(e) for e in errors]},
        )
    return await request_validation_exception_handler(request, exc)
