import uuid
from typing import Generic, TypeVar
from pydantic import BaseModel

from catalog_admin.table_state import PageView

RowT = TypeVar("RowT")

class TablePage(BaseModel, Generic[RowT]):
    """One page of an admin table, as rendered under the search box."""
    items: list[RowT]
    page: int
    total_pages: int
    total: int
    range_start: int
    range_end: int
    label: str

    @classmethod
    def from_view(cls, view: PageView) -> "TablePage[RowT]":
        return cls(
            items=view.items,
            page=view.page,
            total_pages=view.total_pages,
            total=view.total,
            range_start=view.range_start,
            range_end=view.range_end,
            label=view.label,
        )

class OptionRead(BaseModel):
    """id + name pair for the select inputs of the forms."""
    id: int | uuid.UUID
    name: str
