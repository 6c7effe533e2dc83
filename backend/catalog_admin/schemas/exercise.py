import uuid
from typing import Annotated
from pydantic import BaseModel, Field, PositiveInt, StringConstraints, field_validator

ExerciseName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=200)]
VideoUrl = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500, pattern=r"^https?://\S+$")]

RELATION_FIELDS = ("equipment_ids", "pattern_ids", "muscle_ids", "secondary_muscle_ids")

class ExerciseIn(BaseModel):
    name_es: ExerciseName
    name_en: ExerciseName | None = None
    description: Annotated[str, Field(max_length=4000)] | None = None
    urlvideo: VideoUrl | None = None
    is_active: bool = True

    plane_id: PositiveInt | None = None
    laterality_id: PositiveInt | None = None
    difficulty_id: PositiveInt | None = None
    training_method_id: PositiveInt | None = None
    type_id: PositiveInt | None = None

    # None leaves the stored associations untouched; a list replaces them
    equipment_ids: list[PositiveInt] | None = None
    pattern_ids: list[PositiveInt] | None = None
    muscle_ids: list[PositiveInt] | None = None
    secondary_muscle_ids: list[PositiveInt] | None = None

    @field_validator("name_en", "description", "urlvideo", mode="before")
    @classmethod
    def blank_is_none(cls, v):
        # empty form inputs arrive as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def fields(self) -> dict:
        return self.model_dump(exclude=set(RELATION_FIELDS))

    def relations(self) -> dict:
        return {name: getattr(self, name) for name in RELATION_FIELDS}

class ExerciseRow(BaseModel):
    id: uuid.UUID
    name_es: str
    name_en: str
    description: str | None = None
    urlvideo: str | None = None
    has_video: bool = False
    is_active: bool = True

    plane_id: int | None = None
    laterality_id: int | None = None
    difficulty_id: int | None = None
    training_method_id: int | None = None
    type_id: int | None = None
    plane_name: str = "—"
    laterality_name: str = "—"
    difficulty_name: str = "—"
    training_method_name: str = "—"
    type_name: str = "—"

    equipment: list[str] = []
    primary_muscles: list[str] = []
    secondary_muscles: list[str] = []
    patterns: list[str] = []
    equipment_ids: list[int] = []
    pattern_ids: list[int] = []
    muscle_ids: list[int] = []
    secondary_muscle_ids: list[int] = []
