# catalog_admin/table_state.py
"""
Search + pagination for the admin tables, plus the per-view state container.

Everything here is pure: rows are plain mappings (the flat display rows the
repositories produce or the JSON the API returns), and every transition
returns a new ``TableState`` instead of mutating the current one.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, Iterable, Mapping, Sequence, TypeVar

T = TypeVar("T")
Row = Mapping[str, Any]

DEFAULT_PAGE_SIZE = 10
EXERCISE_PAGE_SIZE = 15


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def row_matches(row: Row, query: str, fields: Iterable[str]) -> bool:
    """OR across fields; a list-valued field matches if any element does."""
    q = query.strip().lower()
    if not q:
        return True
    for name in fields:
        value = row.get(name)
        values = value if isinstance(value, (list, tuple)) else (value,)
        if any(q in _text(v).lower() for v in values):
            return True
    return False


def filter_rows(rows: Sequence[T], query: str, fields: Iterable[str]) -> list[T]:
    fields = tuple(fields)
    return [r for r in rows if row_matches(r, query, fields)]


def total_pages(count: int, page_size: int) -> int:
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, count: int, page_size: int) -> int:
    return min(max(1, page), total_pages(count, page_size))


@dataclass(slots=True)
class PageView(Generic[T]):
    items: list[T]
    page: int
    total_pages: int
    total: int
    range_start: int
    range_end: int

    @property
    def label(self) -> str:
        return f"Mostrando {self.range_start}-{self.range_end} de {self.total}"


def paginate(rows: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> PageView[T]:
    if page_size < 1:
        raise ValueError("page_size must be positive")
    total = len(rows)
    page = clamp_page(page, total, page_size)
    start = (page - 1) * page_size
    items = list(rows[start:start + page_size])
    return PageView(
        items=items,
        page=page,
        total_pages=total_pages(total, page_size),
        total=total,
        range_start=start + 1 if total else 0,
        range_end=min(page * page_size, total) if total else 0,
    )


@dataclass(frozen=True, slots=True)
class TableState:
    """What one admin table view holds between user actions."""
    items: tuple[Row, ...] = ()
    query: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    search_fields: tuple[str, ...] = ("name",)
    editing_id: Any = None
    creating: bool = False
    pending_delete: Any = None
    loading: bool = True
    key: str = "id"

    @property
    def filtered(self) -> list[Row]:
        return filter_rows(self.items, self.query, self.search_fields)

    @property
    def view(self) -> PageView[Row]:
        return paginate(self.filtered, self.page, self.page_size)

    @property
    def dialog_open(self) -> bool:
        return self.creating or self.editing_id is not None

    def find(self, key_value: Any) -> Row | None:
        return next((r for r in self.items if r.get(self.key) == key_value), None)


def _clamped(state: TableState) -> TableState:
    page = clamp_page(state.page, len(state.filtered), state.page_size)
    return state if page == state.page else replace(state, page=page)


def loaded(state: TableState, rows: Iterable[Row]) -> TableState:
    return _clamped(replace(state, items=tuple(rows), loading=False))


def search(state: TableState, query: str) -> TableState:
    return replace(state, query=query, page=1)


def go_to_page(state: TableState, page: int) -> TableState:
    return replace(state, page=clamp_page(page, len(state.filtered), state.page_size))


def begin_create(state: TableState) -> TableState:
    return replace(state, creating=True, editing_id=None)


def begin_edit(state: TableState, key_value: Any) -> TableState:
    if state.find(key_value) is None:
        raise KeyError(key_value)
    return replace(state, creating=False, editing_id=key_value)


def close_dialog(state: TableState) -> TableState:
    return replace(state, creating=False, editing_id=None)


def saved(state: TableState, row: Row) -> TableState:
    """Patch the edited row in place, or prepend a newly created one."""
    key_value = row.get(state.key)
    if state.find(key_value) is not None:
        items = tuple(row if r.get(state.key) == key_value else r for r in state.items)
    else:
        items = (row, *state.items)
    return _clamped(replace(state, items=items, creating=False, editing_id=None))


def request_delete(state: TableState, key_value: Any) -> TableState:
    if state.find(key_value) is None:
        raise KeyError(key_value)
    return replace(state, pending_delete=key_value)


def cancel_delete(state: TableState) -> TableState:
    return replace(state, pending_delete=None)


def deleted(state: TableState, key_value: Any) -> TableState:
    items = tuple(r for r in state.items if r.get(state.key) != key_value)
    pending = None if state.pending_delete == key_value else state.pending_delete
    return _clamped(replace(state, items=items, pending_delete=pending))
