# catalog_admin/repositories/exercise_repo.py
from __future__ import annotations
import uuid
from typing import Any, Iterable, Mapping, Optional

from sqlalchemy import delete, select, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

from catalog_admin.models import (
    DifficultyLevel,
    Equipment,
    Exercise,
    ExerciseEquipment,
    ExerciseMovementPattern,
    ExerciseMuscle,
    ExerciseMuscleSubgroup,
    ExerciseType,
    Laterality,
    MovementPattern,
    Muscle,
    MuscleRole,
    Plane,
    TrainingMethod,
)
from catalog_admin.repositories.base import CatalogRepository
from catalog_admin.repositories.joined import JoinSpec, eager, flatten, follow
from catalog_admin.repositories.relations import delete_children, sync_relation

PLACEHOLDER = "—"

# form field -> (join model, related column, related model, role)
RELATIONS: dict[str, tuple[type, str, type, Optional[MuscleRole]]] = {
    "equipment_ids": (ExerciseEquipment, "equipment_id", Equipment, None),
    "pattern_ids": (ExerciseMovementPattern, "pattern_id", MovementPattern, None),
    "muscle_ids": (ExerciseMuscle, "muscle_id", Muscle, MuscleRole.primary),
    "secondary_muscle_ids": (ExerciseMuscle, "muscle_id", Muscle, MuscleRole.secondary),
}

CHILD_TABLES = (ExerciseEquipment, ExerciseMovementPattern, ExerciseMuscle, ExerciseMuscleSubgroup)


def _unique(values: Iterable[Any]) -> list[Any]:
    return [v for v in dict.fromkeys(values) if v is not None]


class ExerciseRepository(CatalogRepository[Exercise]):
    model = Exercise
    columns = (
        "id", "name_es", "name_en", "description", "urlvideo", "is_active",
        "plane_id", "laterality_id", "difficulty_id", "training_method_id", "type_id",
    )
    joins = (
        JoinSpec("plane", fallback=PLACEHOLDER),
        JoinSpec("laterality", fallback=PLACEHOLDER),
        JoinSpec("difficulty", fallback=PLACEHOLDER),
        JoinSpec("training_method", fallback=PLACEHOLDER),
        JoinSpec("exercise_type", label="type_name", fallback=PLACEHOLDER),
    )
    order_by = "name_es"
    references = {
        "plane_id": Plane,
        "laterality_id": Laterality,
        "difficulty_id": DifficultyLevel,
        "training_method_id": TrainingMethod,
        "type_id": ExerciseType,
    }

    # READS
    def _select(self):
        return select(Exercise).options(
            *(eager(Exercise, spec.path) for spec in self.joins),
            selectinload(Exercise.muscles).joinedload(ExerciseMuscle.muscle),
            selectinload(Exercise.equipment).joinedload(ExerciseEquipment.equipment),
            selectinload(Exercise.movement_patterns).joinedload(ExerciseMovementPattern.movement_pattern),
        ).execution_options(populate_existing=True)

    def to_row(self, ex: Exercise) -> dict[str, Any]:
        row = flatten(ex, self.columns, self.joins)
        row["name_en"] = ex.name_en or ex.name_es
        row["has_video"] = bool(ex.urlvideo)

        by_role: dict[MuscleRole, list[Muscle]] = {MuscleRole.primary: [], MuscleRole.secondary: []}
        for link in ex.muscles:
            muscle = follow(link, "muscle")
            if muscle is not None:
                by_role[MuscleRole(link.role)].append(muscle)
        equipment = [e for e in (follow(link, "equipment") for link in ex.equipment) if e is not None]
        patterns = [p for p in (follow(link, "movement_pattern") for link in ex.movement_patterns) if p is not None]

        row["primary_muscles"] = _unique(m.name for m in by_role[MuscleRole.primary])
        row["secondary_muscles"] = _unique(m.name for m in by_role[MuscleRole.secondary])
        row["equipment"] = _unique(e.name for e in equipment)
        row["patterns"] = _unique(p.name for p in patterns)
        row["muscle_ids"] = _unique(m.id for m in by_role[MuscleRole.primary])
        row["secondary_muscle_ids"] = _unique(m.id for m in by_role[MuscleRole.secondary])
        row["equipment_ids"] = _unique(e.id for e in equipment)
        row["pattern_ids"] = _unique(p.id for p in patterns)
        return row

    def rows(self) -> list[dict[str, Any]]:
        stmt = self._select().order_by(Exercise.name_es.asc(), Exercise.id.asc())
        return [self.to_row(ex) for ex in self.db.execute(stmt).unique().scalars().all()]

    def row(self, item_id: uuid.UUID) -> Optional[dict[str, Any]]:
        ex = self.db.execute(self._select().where(Exercise.id == item_id)).unique().scalar_one_or_none()
        return self.to_row(ex) if ex else None

    def options(self) -> list[dict[str, Any]]:
        stmt = select(Exercise.id, Exercise.name_es).order_by(Exercise.name_es.asc())
        return [{"id": r.id, "name": r.name_es} for r in self.db.execute(stmt)]

    # WRITES
    def check_relation_ids(self, relations: Mapping[str, Optional[list[int]]]) -> None:
        for field, ids in relations.items():
            if not ids:
                continue
            target = RELATIONS[field][2]
            wanted = set(ids)
            found = self.db.execute(
                select(func.count()).select_from(target).where(target.id.in_(wanted))
            ).scalar_one()
            if found != len(wanted):
                raise ValueError(f"{field}_not_found")

    def sync_relations(self, exercise_id: uuid.UUID, relations: Mapping[str, Optional[list[int]]]) -> None:
        """Replace-all for every relation list provided; None leaves it alone."""
        for field, ids in relations.items():
            if ids is None:
                continue
            join_model, column, _, role = RELATIONS[field]
            if role is None:
                sync_relation(self.db, exercise_id, join_model, column, ids)
            else:
                sync_relation(self.db, exercise_id, join_model, column, ids,
                              extra={"role": role}, scope={"role": role})

    def save(
        self,
        item_id: Optional[uuid.UUID] = None,
        *,
        fields: Mapping[str, Any],
        relations: Mapping[str, Optional[list[int]]],
    ) -> Optional[Exercise]:
        """Insert or update the exercise and its associations in one transaction."""
        if item_id is not None:
            entity = self.get(item_id)
            if not entity:
                return None
        self.check_references(fields)
        self.check_relation_ids(relations)
        if item_id is None:
            entity = Exercise(id=uuid.uuid4(), **fields)
            self.db.add(entity)
        else:
            for name, value in fields.items():
                setattr(entity, name, value)
        try:
            self.db.flush()
            self.sync_relations(entity.id, relations)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ValueError("integrity_error")
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        return entity

    def delete(self, item_id: uuid.UUID) -> bool:
        """Drop the association rows first, then the exercise, as one unit."""
        try:
            delete_children(self.db, item_id, CHILD_TABLES)
            deleted = self.db.execute(delete(Exercise).where(Exercise.id == item_id)).rowcount
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ValueError("record_in_use")
        return bool(deleted)
