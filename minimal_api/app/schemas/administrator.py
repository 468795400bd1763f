"""
Pydantic models for administrator data.

``AdministratorDTO`` is the creation payload, ``LoginDTO`` the
credential pair posted to the login route.  Responses never carry the
password: ``AdministratorMV`` is the view model returned by the CRUD
routes and ``AdministratorLogged`` the body returned on a successful
login.

Request fields are optional and nullable so that a payload with missing
or null fields still reaches the validation policy, which treats them
as empty and reports every problem at once (see ``services.validation``).
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class LoginDTO(BaseModel):
    email: Optional[str] = Field(None, examples=["adm@example.com"])
    password: Optional[str] = Field(None, examples=["123456"])


class AdministratorDTO(BaseModel):
    """Schema for registering an administrator."""

    email: Optional[str] = Field(None, examples=["editor@example.com"])
    password: Optional[str] = Field(None, examples=["secret"])
    profile: Optional[str] = Field(None, examples=["Editor"], description="Either Admin or Editor")


class AdministratorMV(BaseModel):
    """Schema for reading an administrator from the API."""

    id: int
    email: str
    profile: str

    model_config = {
        "from_attributes": True,
    }


class AdministratorLogged(BaseModel):
    email: str
    profile: str
    token: str


class ErrorAdministrator(BaseModel):
    """Validation result for ``AdministratorDTO``.  Empty list means valid."""

    messages: List[str] = Field(default_factory=list)
