# catalog_admin/routers/common.py
"""The table / form / delete-confirmation endpoints every catalog page shares."""
from typing import Any, Iterable, Sequence

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from catalog_admin.db import get_db
from catalog_admin.deps.auth import get_current_user, require_editor
from catalog_admin.repositories.base import CatalogRepository
from catalog_admin.schemas.table import OptionRead, TablePage
from catalog_admin.table_state import DEFAULT_PAGE_SIZE, filter_rows, paginate

SearchQuery = Query("", max_length=200, description="Case-insensitive substring")
PageQuery = Query(1, ge=1, description="1-based; clamped to the last page")


def table_page(
    row_model: type[BaseModel],
    rows: Sequence[dict[str, Any]],
    *,
    q: str,
    page: int,
    fields: Iterable[str],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> TablePage:
    view = paginate(filter_rows(rows, q, fields), page, page_size)
    return TablePage[row_model].from_view(view)


def store_error(e: ValueError) -> HTTPException:
    """Map a repository ValueError marker to the response the dialog shows."""
    marker = str(e)
    if marker == "record_in_use":
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="record is still referenced")
    if marker.endswith("_not_found"):
        field = marker[: -len("_not_found")]
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"{field} not found")
    if marker == "integrity_error":
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="conflicts with existing data")
    raise e


def build_catalog_router(
    *,
    prefix: str,
    tag: str,
    label: str,
    repo_cls: type[CatalogRepository],
    form: type[BaseModel],
    row: type[BaseModel],
    search_fields: Sequence[str] = ("name",),
    page_size: int = DEFAULT_PAGE_SIZE,
    id_type: type = int,
    with_options: bool = True,
) -> APIRouter:
    """
    List / options / get / create / update / delete for one admin table.
    Reads need a signed-in user, writes an admin or manager.
    """
    router = APIRouter(prefix=prefix, tags=[tag], dependencies=[Depends(get_current_user)])
    def not_found() -> HTTPException:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")

    @router.get("", response_model=TablePage[row])
    def list_page(q: str = SearchQuery, page: int = PageQuery, db: Session = Depends(get_db)):
        return table_page(row, repo_cls(db).rows(), q=q, page=page,
                          fields=search_fields, page_size=page_size)

    @router.get("/all", response_model=list[row])
    def list_all(db: Session = Depends(get_db)):
        return repo_cls(db).rows()

    if with_options:
        @router.get("/options", response_model=list[OptionRead])
        def list_options(db: Session = Depends(get_db)):
            return repo_cls(db).options()

    @router.get("/{item_id}", response_model=row)
    def get_item(item_id: id_type, db: Session = Depends(get_db)):
        found = repo_cls(db).row(item_id)
        if not found:
            raise not_found()
        return found

    @router.post("", response_model=row, status_code=status.HTTP_201_CREATED,
                 dependencies=[Depends(require_editor)])
    def create_item(payload: form, db: Session = Depends(get_db)):
        repo = repo_cls(db)
        try:
            entity = repo.create(**payload.model_dump())
        except ValueError as e:
            raise store_error(e)
        return repo.row(entity.id)

    @router.put("/{item_id}", response_model=row, dependencies=[Depends(require_editor)])
    def update_item(item_id: id_type, payload: form, db: Session = Depends(get_db)):
        repo = repo_cls(db)
        try:
            entity = repo.update(item_id, **payload.model_dump())
        except ValueError as e:
            raise store_error(e)
        if not entity:
            raise not_found()
        return repo.row(item_id)

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT,
                   dependencies=[Depends(require_editor)])
    def delete_item(item_id: id_type, db: Session = Depends(get_db)):
        try:
            removed = repo_cls(db).delete(item_id)
        except ValueError as e:
            raise store_error(e)
        if not removed:
            raise not_found()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
