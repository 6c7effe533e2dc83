import uuid
from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Boolean, Integer, ForeignKey, String, Text, Uuid, Enum as SAEnum, true
from catalog_admin.db import Base

class MuscleRole(str, Enum):
    primary = "primary"
    secondary = "secondary"

class Exercise(Base):
    __tablename__ = "exercise"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name_es: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    name_en: Mapped[str | None] = mapped_column(String(200), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    urlvideo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    plane_id: Mapped[int | None] = mapped_column(ForeignKey("plane.id"), nullable=True)
    laterality_id: Mapped[int | None] = mapped_column(ForeignKey("laterality.id"), nullable=True)
    difficulty_id: Mapped[int | None] = mapped_column(ForeignKey("difficulty_level.id"), nullable=True)
    training_method_id: Mapped[int | None] = mapped_column(ForeignKey("training_method.id"), nullable=True)
    type_id: Mapped[int | None] = mapped_column(ForeignKey("exercise_type.id"), nullable=True)

    plane = relationship("Plane")
    laterality = relationship("Laterality")
    difficulty = relationship("DifficultyLevel")
    training_method = relationship("TrainingMethod")
    exercise_type = relationship("ExerciseType")

    # Written only through repositories.relations.sync_relation
    muscles = relationship("ExerciseMuscle", viewonly=True, order_by="ExerciseMuscle.id")
    equipment = relationship("ExerciseEquipment", viewonly=True, order_by="ExerciseEquipment.id")
    movement_patterns = relationship("ExerciseMovementPattern", viewonly=True, order_by="ExerciseMovementPattern.id")
    muscle_subgroups = relationship("ExerciseMuscleSubgroup", viewonly=True, order_by="ExerciseMuscleSubgroup.id")

class ExerciseMuscle(Base):
    __tablename__ = "exercise_muscle"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("exercise.id"), index=True)
    muscle_id: Mapped[int] = mapped_column(ForeignKey("muscle.id"), index=True)
    role: Mapped[MuscleRole] = mapped_column(
        SAEnum(MuscleRole, name="muscle_role"),
        nullable=False,
        server_default=MuscleRole.primary.value,
    )

    exercise = relationship("Exercise")
    muscle = relationship("Muscle")

class ExerciseEquipment(Base):
    __tablename__ = "exercise_equipment"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("exercise.id"), index=True)
    equipment_id: Mapped[int] = mapped_column(ForeignKey("equipment.id"), index=True)

    exercise = relationship("Exercise")
    equipment = relationship("Equipment")

class ExerciseMovementPattern(Base):
    __tablename__ = "exercise_movement_pattern"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("exercise.id"), index=True)
    pattern_id: Mapped[int] = mapped_column(ForeignKey("movement_pattern.id"), index=True)

    exercise = relationship("Exercise")
    movement_pattern = relationship("MovementPattern")

class ExerciseMuscleSubgroup(Base):
    __tablename__ = "exercise_muscle_subgroup"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("exercise.id"), index=True)
    subgroup_id: Mapped[int] = mapped_column(ForeignKey("muscle_subgroup.id"), index=True)

    exercise = relationship("Exercise")
    subgroup = relationship("MuscleSubgroup")
