# catalog_admin/repositories/relations.py
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from sqlalchemy import delete, insert
from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


def sync_relation(
    db: Session,
    parent_id: Any,
    join_model: type,
    column: str,
    target_ids: Iterable[int],
    *,
    parent_column: str = "exercise_id",
    extra: Mapping[str, Any] | None = None,
    scope: Mapping[str, Any] | None = None,
) -> int:
    """
    Replace every join row of ``parent_id`` with one row per target id.

    Not a diff: the existing rows (restricted to ``scope`` when given) are
    deleted unconditionally, then the new set is inserted. Statements are
    only flushed; the caller owns the commit, so a failure before it rolls
    the whole replacement back.
    """
    parent_col = getattr(join_model, parent_column)
    stmt = delete(join_model).where(parent_col == parent_id)
    for name, value in (scope or {}).items():
        stmt = stmt.where(getattr(join_model, name) == value)
    removed = db.execute(stmt).rowcount

    # keep first-seen order, drop repeats
    ids = list(dict.fromkeys(target_ids))
    if ids:
        db.execute(
            insert(join_model),
            [{parent_column: parent_id, column: i, **(extra or {})} for i in ids],
        )
    log.debug("sync %s parent=%s removed=%s inserted=%s",
              join_model.__tablename__, parent_id, removed, len(ids))
    return len(ids)


def delete_children(
    db: Session,
    parent_id: Any,
    join_models: Iterable[type],
    *,
    parent_column: str = "exercise_id",
) -> int:
    """Delete the association rows that would block deleting the parent."""
    total = 0
    for join_model in join_models:
        total += db.execute(
            delete(join_model).where(getattr(join_model, parent_column) == parent_id)
        ).rowcount
    return total
