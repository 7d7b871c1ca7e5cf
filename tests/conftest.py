"""Shared fixtures: an in-memory stand-in for the remote todos table."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from taskdeck.providers import StoreError, TodoRecord  # noqa: E402
from taskdeck.todo_list import TodoList  # noqa: E402

FIXED_TIME = "10/18/26, 09:30:00"


class FakeTodoStore:
    """
    In-memory TodoStore for unit tests.

    - Assigns increasing ids like the real table
    - Records every call for assertions
    - ``fail_next`` makes the next call raise StoreError
    """

    def __init__(self, records: list[TodoRecord] | None = None) -> None:
        self.rows: dict[int, TodoRecord] = {r.id: r for r in records or []}
        self.next_id = max(self.rows, default=0) + 1
        self.calls: list[str] = []
        self.fail_next = False

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_next:
            self.fail_next = False
            raise StoreError(f"{name} failed")

    def list_todos(self) -> list[TodoRecord]:
        self._enter("list")
        return sorted(self.rows.values(), key=lambda r: r.id, reverse=True)

    def insert_todo(
        self, text: str, description: str, completed: bool, time: str
    ) -> list[TodoRecord]:
        self._enter("insert")
        record = TodoRecord(self.next_id, text, description, completed, time)
        self.rows[record.id] = record
        self.next_id += 1
        return [record]

    def set_completed(self, todo_id: int, completed: bool) -> TodoRecord:
        self._enter("update")
        if todo_id not in self.rows:
            raise StoreError(f"No todo with id {todo_id}")
        self.rows[todo_id] = replace(self.rows[todo_id], completed=completed)
        return self.rows[todo_id]

    def delete_todo(self, todo_id: int) -> None:
        self._enter("delete")
        self.rows.pop(todo_id, None)


@pytest.fixture()
def store() -> FakeTodoStore:
    """Store preloaded with two rows, ids 1 and 2."""
    return FakeTodoStore(
        [
            TodoRecord(1, "Write report", "", False, "10/17/26, 08:00:00"),
            TodoRecord(2, "Buy milk", "2 litres", False, "10/17/26, 09:00:00"),
        ]
    )


@pytest.fixture()
def todos(store: FakeTodoStore) -> TodoList:
    return TodoList(store, clock=lambda: FIXED_TIME)
