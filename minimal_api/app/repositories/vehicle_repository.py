from typing import List, Optional

from sqlalchemy import func, select

from minimal_api.app.models.vehicle import Vehicle

from .base import SqlAlchemyRepository


def _contains(column, value: str):
    # Case-insensitive substring match; LIKE wildcards in ``value`` are escaped.
    escaped = value.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return func.lower(column).like(f"%{escaped}%", escape="\\")


class VehicleRepository(SqlAlchemyRepository[Vehicle]):
    model = Vehicle

    def list_by_name(self, name: str, page: Optional[int] = None) -> List[Vehicle]:
        return self._fetch(select(Vehicle).where(_contains(Vehicle.name, name)), page)

    def list_by_brand(self, brand: str, page: Optional[int] = None) -> List[Vehicle]:
        return self._fetch(select(Vehicle).where(_contains(Vehicle.brand, brand)), page)
