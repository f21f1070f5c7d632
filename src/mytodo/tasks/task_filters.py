# src/mytodo/tasks/task_filters.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import Task

ALL_FILTER = "All"


def filter_tasks(tasks: Iterable[Task], active_filter: str | None, query: str | None) -> list[Task]:
    """
    Tasks visible under a category filter and a search query.

    - "All" / None / "" means no category constraint, otherwise exact match
    - query is trimmed and matched case-insensitively against text, category and note
    - input order is kept
    """
    category = None if not active_filter or active_filter == ALL_FILTER else active_filter
    q = (query or "").strip().lower()

    out: list[Task] = []
    for t in tasks:
        if category is not None and t.category != category:
            continue
        if q and not (
            q in t.text.lower() or q in t.category.lower() or q in (t.note or "").lower()
        ):
            continue
        out.append(t)
    return out
