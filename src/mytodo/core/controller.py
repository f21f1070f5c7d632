# src/mytodo/core/controller.py

"""
Interaction controller.

Maps user events (add, toggle, note, delete, clear, filter, search, drag/drop)
onto TaskRepository calls and re-renders after each one. Owns the transient
UI state (active filter, search query, drag source); none of it is persisted.

Confirmation, text input and alerts are injected ports, so a console host,
a GUI or a test stub can answer them.
"""

from __future__ import annotations

import logging

from ..render.view import DEFAULT_DATE_FORMAT, RenderedView, render_tasks
from ..tasks.task_filters import ALL_FILTER, filter_tasks
from ..tasks.task_models import Task, TaskValidationError
from ..tasks.task_repository import TaskRepository
from .ports import ConfirmProvider, Notifier, RenderListener, TextPromptProvider

logger = logging.getLogger(__name__)

MSG_EMPTY_TASK = "Please enter a task"
MSG_CONFIRM_DELETE = "Delete this task?"
MSG_CONFIRM_CLEAR = "Clear all tasks?"
MSG_EDIT_NOTE = "Edit note for this task (leave empty to remove):"


class InteractionController:
    def __init__(
        self,
        repository: TaskRepository,
        *,
        confirm: ConfirmProvider,
        prompt: TextPromptProvider,
        notifier: Notifier,
        on_render: RenderListener | None = None,
        default_category: str = "",
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        self.repository = repository
        self._confirm = confirm
        self._prompt = prompt
        self._notifier = notifier
        self._on_render = on_render
        self.default_category = default_category
        self.date_format = date_format

        self.active_filter: str = ALL_FILTER
        self.query: str = ""
        self.drag_source_id: str | None = None
        self.view: RenderedView = self._render()

    # ---- rendering ----

    def visible_tasks(self) -> list[Task]:
        return filter_tasks(self.repository.tasks, self.active_filter, self.query)

    def _render(self) -> RenderedView:
        return render_tasks(
            self.visible_tasks(),
            self.repository.tasks,
            date_format=self.date_format,
        )

    def refresh(self) -> RenderedView:
        self.view = self._render()
        if self._on_render is not None:
            self._on_render(self.view)
        return self.view

    # ---- task events ----

    def add_task(
        self,
        text: str,
        due_date: str | None = None,
        category: str | None = None,
    ) -> Task | None:
        try:
            task = self.repository.add(
                text,
                due_date=due_date,
                category=category or self.default_category,
            )
        except TaskValidationError:
            self._notifier.alert(MSG_EMPTY_TASK)
            return None
        self.refresh()
        return task

    def toggle_complete(self, task_id: str) -> RenderedView:
        self.repository.toggle_complete(task_id)
        return self.refresh()

    def delete_task(self, task_id: str) -> RenderedView:
        if self._confirm.confirm(MSG_CONFIRM_DELETE):
            self.repository.delete(task_id)
        else:
            logger.debug("Delete cancelled id=%s", task_id)
        return self.refresh()

    def edit_note(self, task_id: str) -> RenderedView:
        task = self.repository.get(task_id)
        if task is None:
            return self.refresh()

        new_note = self._prompt.prompt(MSG_EDIT_NOTE, task.note or "")
        if new_note is not None:
            self.repository.set_note(task_id, new_note)
        return self.refresh()

    def clear_all(self) -> RenderedView:
        if not len(self.repository):
            return self.refresh()
        if self._confirm.confirm(MSG_CONFIRM_CLEAR):
            self.repository.clear_all()
        return self.refresh()

    # ---- view events ----

    def select_filter(self, value: str | None) -> RenderedView:
        self.active_filter = value or ALL_FILTER
        return self.refresh()

    def search(self, query: str | None) -> RenderedView:
        self.query = query or ""
        return self.refresh()

    # ---- drag & drop ----

    def start_drag(self, task_id: str) -> None:
        self.drag_source_id = task_id

    def end_drag(self) -> None:
        self.drag_source_id = None

    def drop_on(self, dest_id: str, source_id: str | None = None) -> RenderedView:
        src = self.drag_source_id or source_id
        self.drag_source_id = None
        if not src:
            return self.view
        return self.reorder(src, dest_id)

    def reorder(self, source_id: str, dest_id: str) -> RenderedView:
        self.repository.reorder(source_id, dest_id)
        return self.refresh()
