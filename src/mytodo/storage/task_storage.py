# src/mytodo/storage/task_storage.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStore
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

STORAGE_KEY = "myTodo.tasks.finalv1"
QUOTE_CLOSED_KEY = "myTodo.quoteClosedDate"


class TaskStorage:
    """
    Store adapter: the task list snapshot and the quote dismissal marker.

    Reads are forgiving (a corrupt payload becomes an empty list).
    Writes are not: a failing store raises to the caller.
    """

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv

    def load_tasks(self) -> list[Task]:
        raw = self._kv.get_item(STORAGE_KEY)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored task list is not valid JSON; starting empty.")
            return []

        if not isinstance(data, list):
            logger.warning("Stored task list is %s, not a list; starting empty.", type(data).__name__)
            return []

        tasks: list[Task] = []
        seen: set[str] = set()
        try:
            for item in data:
                if not isinstance(item, dict):
                    raise ValueError(f"task record is {type(item).__name__}, not an object")
                task = Task.from_dict(item)
                if task.id in seen:
                    raise ValueError(f"duplicate task id {task.id!r}")
                seen.add(task.id)
                tasks.append(task)
        except ValueError as e:
            logger.warning("Stored task list is malformed (%s); starting empty.", e)
            return []

        logger.info("Loaded %d tasks.", len(tasks))
        return tasks

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
        self._kv.set_item(STORAGE_KEY, payload)

    def get_quote_closed_date(self) -> str | None:
        return self._kv.get_item(QUOTE_CLOSED_KEY)

    def set_quote_closed_date(self, iso_date: str) -> None:
        self._kv.set_item(QUOTE_CLOSED_KEY, iso_date)
