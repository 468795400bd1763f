"""
Pydantic models for vehicle data.

``VehicleDTO`` is accepted by the create and update routes.  Its fields
are nullable; the validation policy reports missing values.
``VehicleRead`` is the full entity including its identifier.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class VehicleDTO(BaseModel):
    name: Optional[str] = Field(None, examples=["Civic"])
    brand: Optional[str] = Field(None, examples=["Honda"])
    year: Optional[int] = Field(None, examples=[2020])


class VehicleRead(BaseModel):
    """Schema for reading a vehicle from the API."""

    id: int
    name: str
    brand: str
    year: int

    model_config = {
        "from_attributes": True,
    }


class ErrorVehicle(BaseModel):
    """Validation result for ``VehicleDTO``.  Empty list means valid."""

    messages: List[str] = Field(default_factory=list)
