from pydantic import BaseModel, PositiveInt

from catalog_admin.schemas.catalog import NameStr

class MuscleSubgroupIn(BaseModel):
    name: NameStr
    group_id: PositiveInt

class MuscleSubgroupRow(BaseModel):
    id: int
    name: str
    group_id: int
    group_name: str = ""

class MuscleIn(BaseModel):
    name: NameStr
    subgroup_id: PositiveInt | None = None

class MuscleRow(BaseModel):
    id: int
    name: str
    subgroup_id: int | None = None
    subgroup_name: str = ""
    muscle_group_name: str = ""
