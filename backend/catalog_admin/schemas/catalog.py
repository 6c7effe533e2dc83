from typing import Annotated
from pydantic import BaseModel, Field, PositiveInt, StringConstraints, field_validator

# Trimmed, at least two characters (same rule on every catalog form)
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=120)]
DescriptionStr = Annotated[str, Field(max_length=2000)]

class LookupIn(BaseModel):
    name: NameStr

class LookupRow(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}

class SubcapabilityIn(BaseModel):
    name: NameStr
    capability_id: PositiveInt

class SubcapabilityRow(BaseModel):
    id: int
    name: str
    capability_id: int
    capability_name: str = ""

class TrainingMethodIn(BaseModel):
    name: NameStr
    description: DescriptionStr | None = None
    subcapability_id: PositiveInt

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

class TrainingMethodRow(BaseModel):
    id: int
    name: str
    description: str | None = None
    subcapability_id: int
    subcapability_name: str = ""
