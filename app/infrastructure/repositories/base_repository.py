"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, ClassVar, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy.orm import Query, Session

from app.domain.queries import Filter, Page, PageRequest, SortSpec, build_pagination
from app.domain.repositories.base import BaseRepository
from app.infrastructure.database import Base
from app.infrastructure.query_builder import apply_filters, order_clauses

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    default_order: ClassVar[Sequence[SortSpec]] = (SortSpec("created_at", descending=True),)

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def query(self) -> Query:
        """Base query; subclasses add eager loading here."""
        return self.db.query(self.model)

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.query().filter(self.model.id == id).first()

    def paginate(
        self,
        page: PageRequest,
        filters: Sequence[Filter] = (),
        order: Sequence[SortSpec] = (),
    ) -> Page[ModelType]:
        # Page and count are separate statements; no snapshot between them.
        total = apply_filters(self.db.query(self.model), self.model, filters).count()
        items: List[ModelType] = (
            apply_filters(self.query(), self.model, filters)
            .order_by(*order_clauses(self.model, order or self.default_order))
            .offset(page.offset)
            .limit(page.limit)
            .all()
        )
        return Page(items=items, pagination=build_pagination(page, total))

    def create(self, data: Dict[str, Any]) -> ModelType:
        db_obj = self.model(**data)
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, data: Dict[str, Any]) -> ModelType:
        if not data:
            return db_obj

        for field, value in data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ModelType) -> None:
        self.db.delete(db_obj)
        self.db.commit()
