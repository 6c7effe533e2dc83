# catalog_admin/routers/exercises.py
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from catalog_admin.db import get_db
from catalog_admin.deps.auth import get_current_user, require_editor
from catalog_admin.repositories.exercise_repo import ExerciseRepository
from catalog_admin.routers.common import PageQuery, SearchQuery, store_error, table_page
from catalog_admin.schemas.exercise import ExerciseIn, ExerciseRow
from catalog_admin.schemas.table import OptionRead, TablePage
from catalog_admin.table_state import EXERCISE_PAGE_SIZE

router = APIRouter(prefix="/exercises", tags=["exercises"], dependencies=[Depends(get_current_user)])

SEARCH_FIELDS = ("name_es", "name_en", "primary_muscles", "secondary_muscles")

def not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")

@router.get("", response_model=TablePage[ExerciseRow])
def list_exercises(q: str = SearchQuery, page: int = PageQuery, db: Session = Depends(get_db)):
    return table_page(ExerciseRow, ExerciseRepository(db).rows(), q=q, page=page,
                      fields=SEARCH_FIELDS, page_size=EXERCISE_PAGE_SIZE)

@router.get("/all", response_model=list[ExerciseRow])
def all_exercises(db: Session = Depends(get_db)):
    return ExerciseRepository(db).rows()

@router.get("/options", response_model=list[OptionRead])
def exercise_options(db: Session = Depends(get_db)):
    return ExerciseRepository(db).options()

@router.get("/{exercise_id}", response_model=ExerciseRow)
def get_exercise(exercise_id: uuid.UUID, db: Session = Depends(get_db)):
    row = ExerciseRepository(db).row(exercise_id)
    if not row:
        raise not_found()
    return row

@router.post("", response_model=ExerciseRow, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_editor)])
def create_exercise(payload: ExerciseIn, db: Session = Depends(get_db)):
    repo = ExerciseRepository(db)
    try:
        ex = repo.save(fields=payload.fields(), relations=payload.relations())
    except ValueError as e:
        raise store_error(e)
    return repo.row(ex.id)

@router.put("/{exercise_id}", response_model=ExerciseRow, dependencies=[Depends(require_editor)])
def update_exercise(exercise_id: uuid.UUID, payload: ExerciseIn, db: Session = Depends(get_db)):
    repo = ExerciseRepository(db)
    try:
        ex = repo.save(exercise_id, fields=payload.fields(), relations=payload.relations())
    except ValueError as e:
        raise store_error(e)
    if not ex:
        raise not_found()
    return repo.row(exercise_id)

@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_editor)])
def delete_exercise(exercise_id: uuid.UUID, db: Session = Depends(get_db)):
    """Removes the exercise together with its equipment, pattern, muscle and subgroup links."""
    if not ExerciseRepository(db).delete(exercise_id):
        raise not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
