# catalog_admin/repositories/muscle_repo.py
from __future__ import annotations

from catalog_admin.models import Muscle, MuscleGroup, MuscleSubgroup
from catalog_admin.repositories.base import CatalogRepository
from catalog_admin.repositories.joined import JoinSpec

class MuscleSubgroupRepository(CatalogRepository[MuscleSubgroup]):
    model = MuscleSubgroup
    columns = ("id", "name", "group_id")
    joins = (JoinSpec("group"),)
    order_by = "name"
    references = {"group_id": MuscleGroup}

class MuscleRepository(CatalogRepository[Muscle]):
    model = Muscle
    columns = ("id", "name", "subgroup_id")
    joins = (
        JoinSpec("subgroup"),
        JoinSpec("subgroup.group", label="muscle_group_name"),
    )
    order_by = "name"
    references = {"subgroup_id": MuscleSubgroup}
