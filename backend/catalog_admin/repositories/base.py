# catalog_admin/repositories/base.py
from __future__ import annotations
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog_admin.repositories.joined import JoinSpec, load_joined

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: ClassVar[type]

    def __init__(self, db: Session):
        self.db = db

    def get(self, item_id: Any) -> Optional[T]:
        return self.db.get(self.model, item_id)

    def commit_and_refresh(self, entity: T) -> T:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ValueError("integrity_error")
        self.db.refresh(entity)
        return entity

class CatalogRepository(BaseRepository[T]):
    """
    CRUD for one admin table.

    Subclasses declare the display shape: ``columns`` copied from the row,
    ``joins`` inlined from related rows, ``order_by`` for listing, and
    ``references`` mapping a foreign-key column to the model it must point at.
    """
    columns: ClassVar[tuple[str, ...]] = ("id", "name")
    joins: ClassVar[tuple[JoinSpec, ...]] = ()
    order_by: ClassVar[str] = "id"
    references: ClassVar[Mapping[str, type]] = {}

    # READS
    def rows(self) -> list[dict[str, Any]]:
        return load_joined(self.db, self.model, columns=self.columns,
                           joins=self.joins, order_by=self.order_by)

    def row(self, item_id: Any) -> Optional[dict[str, Any]]:
        found = load_joined(self.db, self.model, columns=self.columns, joins=self.joins,
                            where=[self.model.id == item_id])
        return found[0] if found else None

    def options(self) -> list[dict[str, Any]]:
        stmt = select(self.model.id, self.model.name).order_by(self.model.name.asc())
        return [{"id": r.id, "name": r.name} for r in self.db.execute(stmt)]

    # WRITES
    def check_references(self, values: Mapping[str, Any]) -> None:
        for column, target in self.references.items():
            value = values.get(column)
            if value is not None and self.db.get(target, value) is None:
                raise ValueError(f"{column}_not_found")

    def create(self, **values: Any) -> T:
        self.check_references(values)
        entity = self.model(**values)
        self.db.add(entity)
        return self.commit_and_refresh(entity)

    def update(self, item_id: Any, **values: Any) -> Optional[T]:
        entity = self.get(item_id)
        if not entity:
            return None
        self.check_references(values)
        for name, value in values.items():
            setattr(entity, name, value)
        return self.commit_and_refresh(entity)

    def delete(self, item_id: Any) -> bool:
        try:
            deleted = self.db.execute(delete(self.model).where(self.model.id == item_id)).rowcount
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # still referenced by another table
            raise ValueError("record_in_use")
        return bool(deleted)
