# catalog_admin/routers/exercise_links.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from catalog_admin.db import get_db
from catalog_admin.deps.auth import get_current_user, require_editor
from catalog_admin.repositories.link_repo import (
    ExerciseMovementPatternRepository,
    ExerciseMuscleRepository,
    ExerciseMuscleSubgroupRepository,
)
from catalog_admin.routers.common import (
    PageQuery,
    SearchQuery,
    build_catalog_router,
    store_error,
    table_page,
)
from catalog_admin.schemas.table import TablePage
from catalog_admin.schemas.links import (
    ExerciseMovementPatternIn,
    ExerciseMovementPatternRow,
    ExerciseMuscleIn,
    ExerciseMuscleRow,
    ExerciseMuscleSubgroupIn,
    ExerciseMuscleSubgroupRow,
)

router = APIRouter(prefix="/exercise-muscles", tags=["exercise links"],
                   dependencies=[Depends(get_current_user)])

SEARCH_FIELDS = ("exercise_name", "muscle_name", "subgroup_name", "group_name", "role")
def duplicate() -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="combination already exists")

def not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise muscle not found")

@router.get("", response_model=TablePage[ExerciseMuscleRow])
def list_exercise_muscles(q: str = SearchQuery, page: int = PageQuery, db: Session = Depends(get_db)):
    return table_page(ExerciseMuscleRow, ExerciseMuscleRepository(db).rows(),
                      q=q, page=page, fields=SEARCH_FIELDS)

@router.get("/all", response_model=list[ExerciseMuscleRow])
def all_exercise_muscles(db: Session = Depends(get_db)):
    return ExerciseMuscleRepository(db).rows()

@router.get("/{link_id}", response_model=ExerciseMuscleRow)
def get_exercise_muscle(link_id: int, db: Session = Depends(get_db)):
    row = ExerciseMuscleRepository(db).row(link_id)
    if not row:
        raise not_found()
    return row

@router.post("", response_model=ExerciseMuscleRow, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_editor)])
def create_exercise_muscle(payload: ExerciseMuscleIn, db: Session = Depends(get_db)):
    repo = ExerciseMuscleRepository(db)
    if repo.combination_exists(payload.exercise_id, payload.muscle_id, payload.role):
        raise duplicate()
    try:
        link = repo.create(**payload.model_dump())
    except ValueError as e:
        raise store_error(e)
    return repo.row(link.id)

@router.put("/{link_id}", response_model=ExerciseMuscleRow, dependencies=[Depends(require_editor)])
def update_exercise_muscle(link_id: int, payload: ExerciseMuscleIn, db: Session = Depends(get_db)):
    repo = ExerciseMuscleRepository(db)
    if not repo.get(link_id):
        raise not_found()
    if repo.combination_exists(payload.exercise_id, payload.muscle_id, payload.role, exclude_id=link_id):
        raise duplicate()
    try:
        repo.update(link_id, **payload.model_dump())
    except ValueError as e:
        raise store_error(e)
    return repo.row(link_id)

@router.delete("/{link_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_editor)])
def delete_exercise_muscle(link_id: int, db: Session = Depends(get_db)):
    if not ExerciseMuscleRepository(db).delete(link_id):
        raise not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

movement_patterns_router = build_catalog_router(
    prefix="/exercise-movement-patterns",
    tag="exercise links",
    label="Exercise movement pattern",
    repo_cls=ExerciseMovementPatternRepository,
    form=ExerciseMovementPatternIn,
    row=ExerciseMovementPatternRow,
    search_fields=("exercise_name", "pattern_name"),
    with_options=False,
)

muscle_subgroups_router = build_catalog_router(
    prefix="/exercise-muscle-subgroups",
    tag="exercise links",
    label="Exercise muscle subgroup",
    repo_cls=ExerciseMuscleSubgroupRepository,
    form=ExerciseMuscleSubgroupIn,
    row=ExerciseMuscleSubgroupRow,
    search_fields=("exercise_name", "subgroup_name", "muscle_group_name"),
    with_options=False,
)

routers = [router, movement_patterns_router, muscle_subgroups_router]
