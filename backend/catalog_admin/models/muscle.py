from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String
from catalog_admin.db import Base
from catalog_admin.models.catalog import NAME_LENGTH

class MuscleGroup(Base):
    __tablename__ = "muscle_group"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)

class MuscleSubgroup(Base):
    __tablename__ = "muscle_subgroup"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)
    group_id: Mapped[int] = mapped_column(ForeignKey("muscle_group.id"), index=True)

    group = relationship("MuscleGroup")

class Muscle(Base):
    __tablename__ = "muscle"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), nullable=False)
    subgroup_id: Mapped[int | None] = mapped_column(ForeignKey("muscle_subgroup.id"), index=True, nullable=True)

    subgroup = relationship("MuscleSubgroup")
