"""
Task list manager.

Holds the locally cached rows of the todos table and mirrors every
mutation to the store. Local state changes only after the store
confirms; failures are logged and leave the cache untouched.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from taskdeck.providers import StoreError, TodoRecord, TodoStore
from taskdeck.timers import local_timestamp

logger = logging.getLogger(__name__)


class TodoList:
    """Ordered cache of task records, newest first."""

    def __init__(
        self,
        store: TodoStore,
        clock: Callable[[], str] = local_timestamp,
    ) -> None:
        self._store = store
        self._clock = clock
        self._records: list[TodoRecord] = []

    @property
    def records(self) -> tuple[TodoRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> TodoRecord:
        return self._records[index]

    def index_of(self, todo_id: int) -> int | None:
        """Current position of the record with this id, if any."""
        for i, record in enumerate(self._records):
            if record.id == todo_id:
                return i
        return None

    def get(self, todo_id: int) -> TodoRecord | None:
        i = self.index_of(todo_id)
        return None if i is None else self._records[i]

    async def load(self) -> bool:
        """Replace the cache with the store's rows."""
        try:
            rows = await asyncio.to_thread(self._store.list_todos)
        except StoreError as exc:
            logger.error("Fetch error: %s", exc.message)
            return False
        self._records = list(rows)
        logger.info("Loaded %d todo(s)", len(rows))
        return True

    async def create(self, title: str, description: str = "") -> bool:
        """Insert a new task. Returns True only if the store accepted it."""
        text = title.strip()
        if not text:
            return False

        try:
            rows = await asyncio.to_thread(
                self._store.insert_todo,
                text,
                description.strip(),
                False,
                self._clock(),
            )
        except StoreError as exc:
            logger.error("Insert error: %s", exc.message)
            return False

        self._records = list(rows) + self._records
        logger.info("Created todo(s) %s", [r.id for r in rows])
        return True

    async def toggle(self, index: int) -> bool:
        """Flip the completion flag of the record shown at ``index``."""
        record = self._records[index]
        try:
            updated = await asyncio.to_thread(
                self._store.set_completed, record.id, not record.completed
            )
        except StoreError as exc:
            logger.error("Update error: %s", exc.message)
            return False

        # The list may have changed while the call was in flight
        i = self.index_of(record.id)
        if i is None:
            logger.warning("Todo %s vanished before its update landed", record.id)
            return False
        self._records[i] = updated
        return True

    async def delete(self, index: int) -> bool:
        """Remove the record shown at ``index``."""
        record = self._records[index]
        try:
            await asyncio.to_thread(self._store.delete_todo, record.id)
        except StoreError as exc:
            logger.error("Delete error: %s", exc.message)
            return False

        self._records = [r for r in self._records if r.id != record.id]
        logger.info("Deleted todo %s", record.id)
        return True
