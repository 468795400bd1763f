"""Shared helpers for the SQLAlchemy repositories."""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from minimal_api.app.core.db import Base


ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyRepository(Generic[ModelT]):
    """CRUD over a single mapped entity.

    Listing is ordered by primary key.  ``page`` is 1-based; when it is
    ``None`` every matching row is returned.
    """

    model: Type[ModelT]

    def __init__(self, session: Session, page_size: int = 10) -> None:
        self.session = session
        self.page_size = page_size

    def create(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def get(self, entity_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, entity_id)

    def list(self, page: Optional[int] = None) -> List[ModelT]:
        return self._fetch(select(self.model), page)

    def update(self, entity: ModelT) -> ModelT:
        entity = self.session.merge(entity)
        self.session.commit()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.session.delete(entity)
        self.session.commit()

    def _fetch(self, query: Select, page: Optional[int]) -> List[ModelT]:
        query = query.order_by(self.model.id)
        if page is not None:
            query = query.offset((page - 1) * self.page_size).limit(self.page_size)
        return list(self.session.scalars(query))
