# catalog_admin/client.py
"""
Thin HTTP client for the admin API plus ``TableView``, the per-page recipe:
load every row once, search and page locally, submit the dialog form and
patch the local rows with whatever the API returned.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Optional

import httpx
from pydantic import BaseModel, ValidationError

from catalog_admin import table_state as ts
from catalog_admin.table_state import DEFAULT_PAGE_SIZE, PageView, TableState

log = logging.getLogger(__name__)


class CatalogAdminClient:
    """REST client for the catalog admin API.

    Pass ``http`` to reuse an existing ``httpx.Client`` (a FastAPI
    ``TestClient`` works too).
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        http: Optional[httpx.Client] = None,
        token: Optional[str] = None,
        timeout: float = 10.0,
    ) -> None:
        self.http = http or httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)
        self.token = token

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        resp = self.http.request(method, path, headers=self._headers(), **kwargs)
        resp.raise_for_status()
        return resp

    def login(self, email: str, password: str) -> str:
        resp = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = resp.json()["access_token"]
        return self.token

    def all_rows(self, resource: str) -> list[dict[str, Any]]:
        return self._request("GET", f"/{resource}/all").json()

    def page(self, resource: str, *, q: str = "", page: int = 1) -> dict[str, Any]:
        return self._request("GET", f"/{resource}", params={"q": q, "page": page}).json()

    def options(self, resource: str) -> list[dict[str, Any]]:
        return self._request("GET", f"/{resource}/options").json()

    def create(self, resource: str, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", f"/{resource}", json=payload).json()

    def update(self, resource: str, item_id: Any, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"/{resource}/{item_id}", json=payload).json()

    def delete(self, resource: str, item_id: Any) -> None:
        self._request("DELETE", f"/{resource}/{item_id}")


def error_message(exc: httpx.HTTPError) -> str:
    """The API's ``detail`` when there is one, otherwise the transport error."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            detail = exc.response.json().get("detail")
        except ValueError:
            detail = None
        if isinstance(detail, str):
            return detail
        return f"request failed ({exc.response.status_code})"
    return str(exc) or exc.__class__.__name__


class TableView:
    """One admin page: its table state, dialog form errors and last notice."""

    def __init__(
        self,
        client: CatalogAdminClient,
        resource: str,
        *,
        form: Optional[type[BaseModel]] = None,
        search_fields: Iterable[str] = ("name",),
        page_size: int = DEFAULT_PAGE_SIZE,
        key: str = "id",
    ) -> None:
        self.client = client
        self.resource = resource
        self.form = form
        self.state = TableState(page_size=page_size, search_fields=tuple(search_fields), key=key)
        self.field_errors: dict[str, str] = {}
        self.notice: Optional[str] = None

    @property
    def view(self) -> PageView:
        return self.state.view

    def _fail(self, action: str, exc: httpx.HTTPError) -> None:
        self.notice = error_message(exc)
        log.warning("%s %s failed: %s", action, self.resource, self.notice)

    # Table

    def load(self) -> bool:
        """Fetch all rows; on failure keep whatever was shown before."""
        try:
            rows = self.client.all_rows(self.resource)
        except httpx.HTTPError as e:
            self._fail("load", e)
            self.state = replace(self.state, loading=False)
            return False
        self.state = ts.loaded(self.state, rows)
        return True

    def search(self, query: str) -> PageView:
        self.state = ts.search(self.state, query)
        return self.view

    def go_to(self, page: int) -> PageView:
        self.state = ts.go_to_page(self.state, page)
        return self.view

    # Dialog

    def open_create(self) -> None:
        self.field_errors = {}
        self.state = ts.begin_create(self.state)

    def open_edit(self, key_value: Any) -> dict[str, Any]:
        """Start editing; returns the row the form is pre-filled from."""
        self.field_errors = {}
        self.state = ts.begin_edit(self.state, key_value)
        return dict(self.state.find(key_value))

    def close(self) -> None:
        self.field_errors = {}
        self.state = ts.close_dialog(self.state)

    def submit(self, values: dict[str, Any]) -> bool:
        if not self.state.dialog_open:
            raise RuntimeError("no dialog open")
        payload = values
        if self.form is not None:
            try:
                payload = self.form.model_validate(values).model_dump(mode="json")
            except ValidationError as e:
                self.field_errors = {
                    ".".join(str(p) for p in err["loc"]) or "__root__": err["msg"]
                    for err in e.errors()
                }
                return False
        self.field_errors = {}
        try:
            if self.state.editing_id is not None:
                row = self.client.update(self.resource, self.state.editing_id, payload)
            else:
                row = self.client.create(self.resource, payload)
        except httpx.HTTPError as e:
            self._fail("save", e)
            return False
        self.notice = None
        self.state = ts.saved(self.state, row)
        return True

    # Delete confirmation

    def request_delete(self, key_value: Any) -> None:
        self.state = ts.request_delete(self.state, key_value)

    def cancel_delete(self) -> None:
        self.state = ts.cancel_delete(self.state)

    def confirm_delete(self) -> bool:
        key_value = self.state.pending_delete
        if key_value is None:
            raise RuntimeError("no delete pending")
        try:
            self.client.delete(self.resource, key_value)
        except httpx.HTTPError as e:
            self._fail("delete", e)
            return False
        self.notice = None
        self.state = ts.deleted(self.state, key_value)
        return True
