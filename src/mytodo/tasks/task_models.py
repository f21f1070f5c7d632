# src/mytodo/tasks/task_models.py

from __future__ import annotations

import random
import string
import time
from dataclasses import dataclass
from typing import Any

_BASE36 = string.digits + string.ascii_lowercase


class TaskValidationError(ValueError):
    """Raised when a task cannot be created from the given input."""


def _to_base36(n: int) -> str:
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, 36)
        out.append(_BASE36[rem])
    return "".join(reversed(out))


def new_task_id() -> str:
    """Millisecond timestamp in base 36 followed by 5 random base-36 chars."""
    stamp = _to_base36(int(time.time() * 1000))
    suffix = "".join(random.choices(_BASE36, k=5))
    return stamp + suffix


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Records are immutable; updates go through dataclasses.replace().
    due_date is an ISO calendar date string or None ("no due date").
    An empty note means "no note".
    """

    id: str
    text: str
    category: str
    due_date: str | None = None
    note: str = ""
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        # Keys match the original localStorage payload.
        return {
            "id": self.id,
            "text": self.text,
            "dueDate": self.due_date or "",
            "category": self.category,
            "note": self.note,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from its stored form.

        Raises ValueError if the record has no usable id or text.
        """
        task_id = raw.get("id")
        text = raw.get("text")
        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task record without id")
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"task record {task_id!r} without text")

        due = raw.get("dueDate")
        return cls(
            id=task_id,
            text=text,
            category=str(raw.get("category") or ""),
            due_date=str(due) if due else None,
            note=str(raw.get("note") or ""),
            completed=bool(raw.get("completed", False)),
        )
