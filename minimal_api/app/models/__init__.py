"""
ORM models.

Each module defines one SQLAlchemy entity mapped to its own table.
Entities are kept separate from the Pydantic schemas in ``schemas`` so
the persisted shape never leaks directly into the API.
"""

from .administrator import Administrator, Profile
from .vehicle import Vehicle

__all__ = ["Administrator", "Profile", "Vehicle"]
