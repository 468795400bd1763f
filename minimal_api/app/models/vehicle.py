from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from minimal_api.app.core.db import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    brand: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Vehicle {self.id} {self.brand} {self.name} ({self.year})>"
