"""
Payload validation policy.

Pure functions without I/O.  ``None`` counts as empty.  Every failing rule is reported: the
returned error object lists all messages in a fixed order, and an
empty list means the payload is valid.
"""

from minimal_api.app.models.administrator import Profile
from minimal_api.app.schemas.administrator import AdministratorDTO, ErrorAdministrator
from minimal_api.app.schemas.vehicle import ErrorVehicle, VehicleDTO

MIN_VEHICLE_YEAR = 1950

EMAIL_EMPTY = "Email must not be empty."
EMAIL_INVALID = "Enter a valid email address."
PASSWORD_EMPTY = "Password must not be empty."
PROFILE_INVALID = "Profile must be either Admin or Editor."
EMAIL_TAKEN = "Email is already registered."

NAME_EMPTY = "Name must not be empty."
BRAND_EMPTY = "Brand must not be empty."
YEAR_TOO_OLD = f"Vehicle too old. Year must be {MIN_VEHICLE_YEAR} or later."

_PROFILES = {p.value for p in Profile}


def validate_administrator(dto: AdministratorDTO) -> ErrorAdministrator:
    error = ErrorAdministrator()
    if not dto.email:
        error.messages.append(EMAIL_EMPTY)
    elif "@" not in dto.email:
        error.messages.append(EMAIL_INVALID)
    if not dto.password:
        error.messages.append(PASSWORD_EMPTY)
    if dto.profile not in _PROFILES:
        error.messages.append(PROFILE_INVALID)
    return error


def validate_vehicle(dto: VehicleDTO) -> ErrorVehicle:
    error = ErrorVehicle()
    if not dto.name:
        error.messages.append(NAME_EMPTY)
    if not dto.brand:
        error.messages.append(BRAND_EMPTY)
    if dto.year is None or dto.year < MIN_VEHICLE_YEAR:
        error.messages.append(YEAR_TOO_OLD)
    return error
