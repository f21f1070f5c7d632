# src/mytodo/render/view.py

"""
View projection.

Turns the (filtered) task list into display records the presentation host can
draw without knowing anything about Task. Nothing here mutates tasks.
"""

from __future__ import annotations

import html
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from ..tasks.task_models import Task

NO_DUE_DATE = "No due date"
DEFAULT_DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True, slots=True)
class TaskControl:
    action: str
    label: str
    icon: str


@dataclass(frozen=True, slots=True)
class TaskView:
    id: str
    text: str
    category: str
    due_label: str
    note: str | None
    completed: bool
    toggle: TaskControl
    edit_note: TaskControl
    delete: TaskControl


@dataclass(frozen=True, slots=True)
class RenderedView:
    items: tuple[TaskView, ...]
    pending: int
    completed: int

    @property
    def total(self) -> int:
        return self.pending + self.completed

    @property
    def pending_label(self) -> str:
        return f"Pending: {self.pending}"

    @property
    def completed_label(self) -> str:
        return f"Completed: {self.completed}"


EDIT_NOTE_CONTROL = TaskControl(action="note", label="Edit note", icon="📝")
DELETE_CONTROL = TaskControl(action="delete", label="Delete task", icon="✖")


def escape_html(value: object) -> str:
    """Escape & < > " ' so user text can't inject markup. None -> ""."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def format_due_date(value: str | None, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    if not value:
        return NO_DUE_DATE
    try:
        return date.fromisoformat(value[:10]).strftime(date_format)
    except ValueError:
        return value


def toggle_control(completed: bool) -> TaskControl:
    # Label describes what clicking will do, not the current state.
    if completed:
        return TaskControl(action="toggle", label="Mark as not done", icon="↺")
    return TaskControl(action="toggle", label="Mark as complete", icon="✔")


def render_task(task: Task, date_format: str = DEFAULT_DATE_FORMAT) -> TaskView:
    return TaskView(
        id=task.id,
        text=escape_html(task.text),
        category=escape_html(task.category),
        due_label=format_due_date(task.due_date, date_format),
        note=escape_html(task.note) if task.note else None,
        completed=task.completed,
        toggle=toggle_control(task.completed),
        edit_note=EDIT_NOTE_CONTROL,
        delete=DELETE_CONTROL,
    )


def render_tasks(
    filtered: Sequence[Task],
    all_tasks: Sequence[Task],
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RenderedView:
    """Project the filtered list; counters always cover the full list."""
    completed = sum(1 for t in all_tasks if t.completed)
    return RenderedView(
        items=tuple(render_task(t, date_format) for t in filtered),
        pending=len(all_tasks) - completed,
        completed=completed,
    )
