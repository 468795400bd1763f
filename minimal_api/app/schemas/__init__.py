"""
Pydantic schema definitions for API payloads.

Each domain (administrators, vehicles) defines its own request DTOs,
view models and validation error bodies.  Schemas are separated from
the ORM models to decouple API representation from persistence.
"""
