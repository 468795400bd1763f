from typing import Optional

from sqlalchemy import func, select

from minimal_api.app.models.administrator import Administrator

from .base import SqlAlchemyRepository


class AdministratorRepository(SqlAlchemyRepository[Administrator]):
    model = Administrator

    def get_by_email(self, email: str) -> Optional[Administrator]:
        return self.session.scalars(
            select(Administrator).where(Administrator.email == email)
        ).first()

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(Administrator)) or 0
