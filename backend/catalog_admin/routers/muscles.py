# catalog_admin/routers/muscles.py
from catalog_admin.repositories.catalog_repo import MuscleGroupRepository
from catalog_admin.repositories.muscle_repo import MuscleRepository, MuscleSubgroupRepository
from catalog_admin.routers.common import build_catalog_router
from catalog_admin.schemas.catalog import LookupIn, LookupRow
from catalog_admin.schemas.muscle import MuscleIn, MuscleRow, MuscleSubgroupIn, MuscleSubgroupRow

groups_router = build_catalog_router(
    prefix="/muscle-groups",
    tag="muscles",
    label="Muscle group",
    repo_cls=MuscleGroupRepository,
    form=LookupIn,
    row=LookupRow,
)

subgroups_router = build_catalog_router(
    prefix="/muscle-subgroups",
    tag="muscles",
    label="Muscle subgroup",
    repo_cls=MuscleSubgroupRepository,
    form=MuscleSubgroupIn,
    row=MuscleSubgroupRow,
    search_fields=("name", "group_name"),
)

muscles_router = build_catalog_router(
    prefix="/muscles",
    tag="muscles",
    label="Muscle",
    repo_cls=MuscleRepository,
    form=MuscleIn,
    row=MuscleRow,
    search_fields=("name", "subgroup_name", "muscle_group_name"),
)

routers = [groups_router, subgroups_router, muscles_router]
