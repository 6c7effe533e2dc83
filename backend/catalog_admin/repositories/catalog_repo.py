# catalog_admin/repositories/catalog_repo.py
from __future__ import annotations

from catalog_admin.models import (
    Plane,
    Laterality,
    DifficultyLevel,
    ExerciseType,
    Equipment,
    MovementPattern,
    MuscleGroup,
    PhysicalCapability,
    PhysicalSubcapability,
    TrainingMethod,
)
from catalog_admin.repositories.base import CatalogRepository
from catalog_admin.repositories.joined import JoinSpec

# Plain id + name catalogs, listed by id
class PlaneRepository(CatalogRepository[Plane]):
    model = Plane

class LateralityRepository(CatalogRepository[Laterality]):
    model = Laterality

class DifficultyLevelRepository(CatalogRepository[DifficultyLevel]):
    model = DifficultyLevel

class ExerciseTypeRepository(CatalogRepository[ExerciseType]):
    model = ExerciseType

    def options(self):
        # types are presented in their natural (creation) order
        return sorted(super().options(), key=lambda o: o["id"])

class EquipmentRepository(CatalogRepository[Equipment]):
    model = Equipment

class MovementPatternRepository(CatalogRepository[MovementPattern]):
    model = MovementPattern

class MuscleGroupRepository(CatalogRepository[MuscleGroup]):
    model = MuscleGroup

class PhysicalCapabilityRepository(CatalogRepository[PhysicalCapability]):
    model = PhysicalCapability

class PhysicalSubcapabilityRepository(CatalogRepository[PhysicalSubcapability]):
    model = PhysicalSubcapability
    columns = ("id", "name", "capability_id")
    joins = (JoinSpec("capability"),)
    references = {"capability_id": PhysicalCapability}

class TrainingMethodRepository(CatalogRepository[TrainingMethod]):
    model = TrainingMethod
    columns = ("id", "name", "description", "subcapability_id")
    joins = (JoinSpec("subcapability"),)
    references = {"subcapability_id": PhysicalSubcapability}
