"""
Data providers for the task list.

The protocol defines the interface; implementations can be swapped
for testing or alternative data sources.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class StoreError(Exception):
    """A remote store operation failed.

    Carries the message reported by the store client.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class TodoRecord:
    """Immutable snapshot of one row of the todos table."""

    id: int
    text: str
    description: str = ""
    completed: bool = False
    time: str = ""


def todo_from_row(row: Mapping[str, Any]) -> TodoRecord:
    """Convert a row returned by the store to a TodoRecord."""
    if not isinstance(row, Mapping):
        raise StoreError(f"Malformed row: {row!r}")
    if row.get("id") is None:
        raise StoreError(f"Row without id: {dict(row)!r}")
    try:
        todo_id = int(row["id"])
    except (TypeError, ValueError) as exc:
        raise StoreError(f"Malformed row id: {row['id']!r}") from exc
    return TodoRecord(
        id=todo_id,
        text=str(row.get("text") or ""),
        description=str(row.get("description") or ""),
        completed=bool(row.get("completed", False)),
        time=str(row.get("time") or ""),
    )


class TodoStore(Protocol):
    """Protocol for the remote table holding the tasks.

    Every method raises StoreError on failure.
    """

    def list_todos(self) -> list[TodoRecord]:
        """Fetch all rows ordered by id, newest first."""
        ...

    def insert_todo(
        self, text: str, description: str, completed: bool, time: str
    ) -> list[TodoRecord]:
        """Insert one row and return the row(s) the store echoes back."""
        ...

    def set_completed(self, todo_id: int, completed: bool) -> TodoRecord:
        """Update the completion flag of one row and return the updated row."""
        ...

    def delete_todo(self, todo_id: int) -> None:
        """Delete one row by id."""
        ...
