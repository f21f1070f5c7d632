# tests/test_view.py

from __future__ import annotations

from mytodo.render.view import NO_DUE_DATE, escape_html, format_due_date, render_tasks
from mytodo.tasks.task_filters import filter_tasks
from mytodo.tasks.task_models import Task


def test_escape_html_neutralizes_metacharacters() -> None:
    out = escape_html("""<b onclick="x('y')">Tom & Jerry</b>""")
    for ch in "<>\"'":
        assert ch not in out
    assert "&amp;" in out
    assert "&lt;b" in out
    assert escape_html(None) == ""
    assert escape_html(0) == "0"


def test_format_due_date() -> None:
    assert format_due_date(None) == NO_DUE_DATE
    assert format_due_date("") == NO_DUE_DATE
    assert format_due_date("2024-03-05") == "05/03/2024"
    assert format_due_date("2024-03-05", "%Y.%m.%d") == "2024.03.05"
    assert format_due_date("next week") == "next week"


def test_render_task_fields_and_controls() -> None:
    tasks = [
        Task(id="a", text="<script>", category="Home", due_date="2024-12-31", note="a & b"),
        Task(id="b", text="Done thing", category="Work", completed=True),
    ]
    view = render_tasks(tasks, tasks)

    a, b = view.items
    assert a.id == "a"
    assert a.text == "&lt;script&gt;"
    assert a.due_label == "31/12/2024"
    assert a.note == "a &amp; b"
    assert a.toggle.label == "Mark as complete"
    assert a.toggle.icon == "✔"
    assert a.edit_note.label == "Edit note"
    assert a.delete.label == "Delete task"

    assert b.note is None
    assert b.due_label == NO_DUE_DATE
    assert b.toggle.label == "Mark as not done"
    assert b.toggle.icon == "↺"


def test_counters_cover_the_full_list_not_the_filtered_view() -> None:
    tasks = [
        Task(id="1", text="A", category="Home"),
        Task(id="2", text="B", category="Work", completed=True),
        Task(id="3", text="C", category="Work"),
        Task(id="4", text="D", category="Home", completed=True),
    ]
    for active in ("All", "Home", "Work", "Other"):
        view = render_tasks(filter_tasks(tasks, active, ""), tasks)
        assert view.pending == 2
        assert view.completed == 2
        assert view.pending + view.completed == len(tasks)

    view = render_tasks([], tasks)
    assert view.items == ()
    assert view.pending_label == "Pending: 2"
    assert view.completed_label == "Completed: 2"
    assert view.total == 4
