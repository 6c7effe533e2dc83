from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Text
from catalog_admin.db import Base

NAME_LENGTH = 120


class _Lookup:
    """Columns shared by the plain id + name catalogs."""
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)


class Plane(_Lookup, Base):
    __tablename__ = "plane"


class Laterality(_Lookup, Base):
    __tablename__ = "laterality"


class DifficultyLevel(_Lookup, Base):
    __tablename__ = "difficulty_level"


class ExerciseType(_Lookup, Base):
    __tablename__ = "exercise_type"


class Equipment(_Lookup, Base):
    __tablename__ = "equipment"


class MovementPattern(_Lookup, Base):
    __tablename__ = "movement_pattern"


class PhysicalCapability(_Lookup, Base):
    __tablename__ = "physical_capability"


class PhysicalSubcapability(Base):
    __tablename__ = "physical_subcapability"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)
    capability_id: Mapped[int] = mapped_column(ForeignKey("physical_capability.id"), index=True)

    capability = relationship("PhysicalCapability")


class TrainingMethod(Base):
    __tablename__ = "training_method"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    subcapability_id: Mapped[int] = mapped_column(ForeignKey("physical_subcapability.id"), index=True)

    subcapability = relationship("PhysicalSubcapability")
