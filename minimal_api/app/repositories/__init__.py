"""
Persistence layer.

Each repository wraps an ORM ``Session`` and exposes the narrow set of
operations its service needs (create, get, list, update, delete plus a
few lookups).  Services depend only on these methods, so the storage
technology can change without touching services or handlers.
"""

from .administrator_repository import AdministratorRepository
from .vehicle_repository import VehicleRepository

__all__ = ["AdministratorRepository", "VehicleRepository"]
