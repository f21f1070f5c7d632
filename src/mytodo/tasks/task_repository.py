# src/mytodo/tasks/task_repository.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import replace

from ..storage.task_storage import TaskStorage
from .task_models import Task, TaskValidationError, new_task_id

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    In-memory ordered task list; the only place tasks are mutated.

    - list order is display and persistence order (newest first on add)
    - every successful mutation writes the whole list to storage exactly once
    - unknown ids are silent no-ops (return False, nothing written)
    """

    def __init__(
        self,
        storage: TaskStorage,
        *,
        id_factory: Callable[[], str] = new_task_id,
    ) -> None:
        self._storage = storage
        self._id_factory = id_factory
        self._tasks: list[Task] = storage.load_tasks()

    # ---- queries ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx >= 0 else None

    def _index_of(self, task_id: str) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return -1

    def _commit(self, new_tasks: list[Task]) -> None:
        # Write first; memory only moves once the store has the new list.
        self._storage.save_tasks(new_tasks)
        self._tasks = new_tasks

    def _fresh_id(self) -> str:
        existing = {t.id for t in self._tasks}
        while True:
            tid = self._id_factory()
            if tid not in existing:
                return tid
            logger.debug("Task id collision on %s, regenerating.", tid)

    # ---- mutations ----

    def add(
        self,
        text: str,
        due_date: str | None = None,
        category: str = "",
        note: str = "",
    ) -> Task:
        if not text or not text.strip():
            raise TaskValidationError("text is required")

        task = Task(
            id=self._fresh_id(),
            text=text.strip(),
            category=category,
            due_date=due_date or None,
            note=(note or "").strip(),
            completed=False,
        )
        self._commit([task, *self._tasks])
        logger.debug("Task added id=%s category=%s due=%s", task.id, task.category, task.due_date)
        return task

    def toggle_complete(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx < 0:
            logger.debug("toggle_complete: unknown id=%s", task_id)
            return False
        new_tasks = list(self._tasks)
        new_tasks[idx] = replace(new_tasks[idx], completed=not new_tasks[idx].completed)
        self._commit(new_tasks)
        return True

    def set_note(self, task_id: str, note: str) -> bool:
        idx = self._index_of(task_id)
        if idx < 0:
            logger.debug("set_note: unknown id=%s", task_id)
            return False
        new_tasks = list(self._tasks)
        new_tasks[idx] = replace(new_tasks[idx], note=(note or "").strip())
        self._commit(new_tasks)
        return True

    def delete(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx < 0:
            logger.debug("delete: unknown id=%s", task_id)
            return False
        self._commit(self._tasks[:idx] + self._tasks[idx + 1 :])
        logger.debug("Task deleted id=%s", task_id)
        return True

    def clear_all(self) -> None:
        self._commit([])
        logger.info("All tasks cleared.")

    def reorder(self, source_id: str, dest_id: str) -> bool:
        """
        Move source so it sits immediately before dest.

        The insertion point is dest's index after source has been removed,
        so the rule is the same whether source started above or below dest.
        """
        if not source_id or not dest_id or source_id == dest_id:
            return False
        src_idx = self._index_of(source_id)
        if src_idx < 0 or self._index_of(dest_id) < 0:
            logger.debug("reorder: unknown id src=%s dest=%s", source_id, dest_id)
            return False

        new_tasks = list(self._tasks)
        moved = new_tasks.pop(src_idx)
        dest_idx = next(i for i, t in enumerate(new_tasks) if t.id == dest_id)
        new_tasks.insert(dest_idx, moved)
        self._commit(new_tasks)
        return True
