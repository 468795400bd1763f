"""ORM model for administrator accounts."""

from enum import Enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from minimal_api.app.core.db import Base


class Profile(str, Enum):
    """Roles an administrator can hold."""

    ADMIN = "Admin"
    EDITOR = "Editor"


class Administrator(Base):
    """An account that can log in and manage vehicles.

    ``profile`` holds one of the ``Profile`` values and doubles as the
    role claim embedded in issued tokens.
    """

    __tablename__ = "administrators"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    profile: Mapped[str] = mapped_column(String(10), nullable=False)

    def __repr__(self) -> str:
        return f"Administrator(id={self.id!r}, email={self.email!r}, profile={self.profile!r})"
