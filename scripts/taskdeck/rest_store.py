"""
TodoStore implementation backed by a Supabase table over its PostgREST API.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from taskdeck.providers import StoreError, TodoRecord, todo_from_row

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "todos"


def _error_message(resp: requests.Response) -> str:
    """Extract PostgREST's error message, falling back to the status line."""
    try:
        payload = resp.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return f"HTTP {resp.status_code}: {resp.reason or 'request failed'}"


class RestTodoStore:
    """TodoStore talking to ``{url}/rest/v1/{table}``."""

    def __init__(
        self,
        url: str,
        key: str,
        table: str = DEFAULT_TABLE,
        session: requests.Session | None = None,
    ) -> None:
        self._endpoint = f"{url.rstrip('/')}/rest/v1/{table}"
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Content-Type": "application/json",
            }
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def _request(
        self,
        method: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        returning: bool = False,
    ) -> Any:
        headers = {"Prefer": "return=representation"} if returning else None
        try:
            resp = self._session.request(
                method, self._endpoint, params=params, json=json, headers=headers
            )
        except requests.RequestException as exc:
            raise StoreError(str(exc)) from exc

        if not resp.ok:
            raise StoreError(_error_message(resp))

        logger.debug("%s %s -> %s", method, self._endpoint, resp.status_code)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise StoreError(f"Invalid JSON from store: {exc}") from exc

    def _rows(self, payload: Any) -> list[TodoRecord]:
        if not isinstance(payload, list):
            raise StoreError(f"Expected a list of rows, got {type(payload).__name__}")
        return [todo_from_row(row) for row in payload]

    def list_todos(self) -> list[TodoRecord]:
        """Fetch all rows ordered by id, newest first."""
        payload = self._request("GET", params={"select": "*", "order": "id.desc"})
        return self._rows(payload)

    def insert_todo(
        self, text: str, description: str, completed: bool, time: str
    ) -> list[TodoRecord]:
        """Insert one row and return the row(s) the store echoes back."""
        row = {
            "text": text,
            "description": description,
            "completed": completed,
            "time": time,
        }
        payload = self._request("POST", json=[row], returning=True)
        return self._rows(payload)

    def set_completed(self, todo_id: int, completed: bool) -> TodoRecord:
        """Update the completion flag of one row and return the updated row."""
        payload = self._request(
            "PATCH",
            params={"id": f"eq.{todo_id}"},
            json={"completed": completed},
            returning=True,
        )
        rows = self._rows(payload)
        if not rows:
            raise StoreError(f"No todo with id {todo_id}")
        return rows[0]

    def delete_todo(self, todo_id: int) -> None:
        """Delete one row by id."""
        self._request("DELETE", params={"id": f"eq.{todo_id}"})
