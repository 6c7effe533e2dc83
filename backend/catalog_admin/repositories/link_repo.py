# catalog_admin/repositories/link_repo.py
"""Repositories for the join tables edited on their own admin pages."""
from __future__ import annotations
import uuid
from typing import Optional

from sqlalchemy import select, func

from catalog_admin.models import (
    Exercise,
    ExerciseMuscle,
    ExerciseMovementPattern,
    ExerciseMuscleSubgroup,
    MovementPattern,
    Muscle,
    MuscleRole,
    MuscleSubgroup,
)
from catalog_admin.repositories.base import CatalogRepository
from catalog_admin.repositories.joined import JoinSpec

EXERCISE_NAME = JoinSpec("exercise", "name_es", label="exercise_name")

class ExerciseMuscleRepository(CatalogRepository[ExerciseMuscle]):
    model = ExerciseMuscle
    columns = ("id", "exercise_id", "muscle_id", "role")
    joins = (
        EXERCISE_NAME,
        JoinSpec("muscle", label="muscle_name"),
        JoinSpec("muscle.subgroup", label="subgroup_name"),
        JoinSpec("muscle.subgroup.group", label="group_name"),
    )
    references = {"exercise_id": Exercise, "muscle_id": Muscle}

    def combination_exists(
        self,
        exercise_id: uuid.UUID,
        muscle_id: int,
        role: MuscleRole | str,
        *,
        exclude_id: Optional[int] = None,
    ) -> bool:
        """
        Count rows with the same (exercise, muscle, role), ignoring the row
        being edited. Check-then-act: two identical submissions racing each
        other can both pass.
        """
        stmt = (
            select(func.count())
            .select_from(ExerciseMuscle)
            .where(
                ExerciseMuscle.exercise_id == exercise_id,
                ExerciseMuscle.muscle_id == muscle_id,
                ExerciseMuscle.role == role,
            )
        )
        if exclude_id is not None:
            stmt = stmt.where(ExerciseMuscle.id != exclude_id)
        return self.db.execute(stmt).scalar_one() > 0

class ExerciseMovementPatternRepository(CatalogRepository[ExerciseMovementPattern]):
    model = ExerciseMovementPattern
    columns = ("id", "exercise_id", "pattern_id")
    joins = (
        JoinSpec("exercise", "name_es", label="exercise_name", fallback="Sin nombre"),
        JoinSpec("movement_pattern", label="pattern_name", fallback="Sin nombre"),
    )
    references = {"exercise_id": Exercise, "pattern_id": MovementPattern}

class ExerciseMuscleSubgroupRepository(CatalogRepository[ExerciseMuscleSubgroup]):
    model = ExerciseMuscleSubgroup
    columns = ("id", "exercise_id", "subgroup_id")
    joins = (
        EXERCISE_NAME,
        JoinSpec("subgroup", label="subgroup_name"),
        JoinSpec("subgroup.group", label="muscle_group_name"),
    )
    references = {"exercise_id": Exercise, "subgroup_id": MuscleSubgroup}
