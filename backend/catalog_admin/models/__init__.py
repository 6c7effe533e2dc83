from catalog_admin.models.user import AdminUser, UserRole, UserStatus
from catalog_admin.models.catalog import (
    Plane,
    Laterality,
    DifficultyLevel,
    ExerciseType,
    Equipment,
    MovementPattern,
    PhysicalCapability,
    PhysicalSubcapability,
    TrainingMethod,
)
from catalog_admin.models.muscle import MuscleGroup, MuscleSubgroup, Muscle
from catalog_admin.models.exercise import (
    Exercise,
    ExerciseMuscle,
    ExerciseEquipment,
    ExerciseMovementPattern,
    ExerciseMuscleSubgroup,
    MuscleRole,
)

__all__ = [
    "AdminUser", "UserRole", "UserStatus",
    "Plane", "Laterality", "DifficultyLevel", "ExerciseType", "Equipment",
    "MovementPattern", "PhysicalCapability", "PhysicalSubcapability", "TrainingMethod",
    "MuscleGroup", "MuscleSubgroup", "Muscle",
    "Exercise", "ExerciseMuscle", "ExerciseEquipment", "ExerciseMovementPattern",
    "ExerciseMuscleSubgroup", "MuscleRole",
]
