# catalog_admin/repositories/joined.py
"""
Load a table together with its to-one joins and flatten it into display rows.

A ``JoinSpec`` names a dotted relationship path from the parent model
(``"subgroup.group"``), the related column to inline and the placeholder used
when any hop of the path is missing. Every hop goes through
``normalize_relation`` right after the fetch, so callers only ever see a
related record or ``None``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload


@dataclass(frozen=True, slots=True)
class JoinSpec:
    path: str
    column: str = "name"
    label: str | None = None
    fallback: str = ""

    @property
    def key(self) -> str:
        if self.label:
            return self.label
        return f"{self.path.rsplit('.', 1)[-1]}_{self.column}"


def normalize_relation(value: Any) -> Any | None:
    """Object, one-element collection or nothing -> the record or None."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def follow(entity: Any, path: str) -> Any | None:
    related = entity
    for part in path.split("."):
        related = normalize_relation(getattr(related, part, None))
        if related is None:
            return None
    return related


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def flatten(entity: Any, columns: Iterable[str], joins: Iterable[JoinSpec] = ()) -> dict[str, Any]:
    row = {name: _plain(getattr(entity, name)) for name in columns}
    for spec in joins:
        related = follow(entity, spec.path)
        value = getattr(related, spec.column, None) if related is not None else None
        row[spec.key] = spec.fallback if value is None else value
    return row


def eager(model: type, path: str):
    """joinedload() chain for a dotted relationship path."""
    option = None
    current = model
    for part in path.split("."):
        attr = getattr(current, part)
        option = joinedload(attr) if option is None else option.joinedload(attr)
        current = attr.property.mapper.class_
    return option


def load_joined(
    db: Session,
    model: type,
    *,
    columns: Sequence[str],
    joins: Sequence[JoinSpec] = (),
    order_by: str = "id",
    where: Iterable[Any] = (),
) -> list[dict[str, Any]]:
    stmt = select(model).options(*(eager(model, spec.path) for spec in joins))
    for clause in where:
        stmt = stmt.where(clause)
    stmt = stmt.order_by(getattr(model, order_by).asc(), model.id.asc())
    entities = db.execute(stmt.execution_options(populate_existing=True)).unique().scalars().all()
    return [flatten(e, columns, joins) for e in entities]
