# catalog_admin/routers/lookups.py
from catalog_admin.repositories.catalog_repo import (
    DifficultyLevelRepository,
    EquipmentRepository,
    ExerciseTypeRepository,
    LateralityRepository,
    MovementPatternRepository,
    PhysicalCapabilityRepository,
    PhysicalSubcapabilityRepository,
    PlaneRepository,
    TrainingMethodRepository,
)
from catalog_admin.routers.common import build_catalog_router
from catalog_admin.schemas.catalog import (
    LookupIn,
    LookupRow,
    SubcapabilityIn,
    SubcapabilityRow,
    TrainingMethodIn,
    TrainingMethodRow,
)

# (prefix, label, repository) for the plain id + name catalogs
SIMPLE_LOOKUPS = [
    ("/planes", "Plane", PlaneRepository),
    ("/lateralities", "Laterality", LateralityRepository),
    ("/difficulty-levels", "Difficulty level", DifficultyLevelRepository),
    ("/exercise-types", "Exercise type", ExerciseTypeRepository),
    ("/equipment", "Equipment", EquipmentRepository),
    ("/movement-patterns", "Movement pattern", MovementPatternRepository),
    ("/physical-capabilities", "Physical capability", PhysicalCapabilityRepository),
]

routers = [
    build_catalog_router(
        prefix=prefix, tag="lookups", label=label, repo_cls=repo_cls,
        form=LookupIn, row=LookupRow,
    )
    for prefix, label, repo_cls in SIMPLE_LOOKUPS
]

routers.append(build_catalog_router(
    prefix="/physical-subcapabilities",
    tag="capabilities",
    label="Physical subcapability",
    repo_cls=PhysicalSubcapabilityRepository,
    form=SubcapabilityIn,
    row=SubcapabilityRow,
    search_fields=("name", "capability_name"),
))

routers.append(build_catalog_router(
    prefix="/training-methods",
    tag="capabilities",
    label="Training method",
    repo_cls=TrainingMethodRepository,
    form=TrainingMethodIn,
    row=TrainingMethodRow,
    search_fields=("name", "subcapability_name"),
))
