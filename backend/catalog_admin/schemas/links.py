import uuid
from pydantic import BaseModel, PositiveInt

from catalog_admin.models import MuscleRole

class ExerciseMuscleIn(BaseModel):
    exercise_id: uuid.UUID
    muscle_id: PositiveInt
    role: MuscleRole = MuscleRole.primary

class ExerciseMuscleRow(BaseModel):
    id: int
    exercise_id: uuid.UUID
    muscle_id: int
    role: MuscleRole
    exercise_name: str = ""
    muscle_name: str = ""
    subgroup_name: str = ""
    group_name: str = ""

class ExerciseMovementPatternIn(BaseModel):
    exercise_id: uuid.UUID
    pattern_id: PositiveInt

class ExerciseMovementPatternRow(BaseModel):
    id: int
    exercise_id: uuid.UUID
    pattern_id: int
    exercise_name: str = "Sin nombre"
    pattern_name: str = "Sin nombre"

class ExerciseMuscleSubgroupIn(BaseModel):
    exercise_id: uuid.UUID
    subgroup_id: PositiveInt

class ExerciseMuscleSubgroupRow(BaseModel):
    id: int
    exercise_id: uuid.UUID
    subgroup_id: int
    exercise_name: str = ""
    subgroup_name: str = ""
    muscle_group_name: str = ""
