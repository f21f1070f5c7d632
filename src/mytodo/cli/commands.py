# src/mytodo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.state import AppState
from ..tasks.task_filters import ALL_FILTER

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console host (/add, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" for nothing to add) or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command /%s", name)
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Plain text (without /) adds a task.")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_ref(state: AppState, ref: str) -> str | None:
    """
    Turn a user reference into a task id.

    A number is a 1-based position in the list as currently displayed;
    anything else is taken as a task id.
    """
    if ref.isdigit():
        idx = int(ref) - 1
        items = state.controller.view.items
        if 0 <= idx < len(items):
            return items[idx].id
        return None
    return ref if state.repository.get(ref) is not None else None


def parse_add_args(args: list[str]) -> tuple[str, str | None, str | None]:
    """
    Split `/add` arguments into (text, due_date, category).

    Raises ValueError if --due is not an ISO calendar date (YYYY-MM-DD).
    """
    words: list[str] = []
    due: str | None = None
    category: str | None = None
    it = iter(args)
    for word in it:
        if word == "--due":
            due = next(it, None)
            if due is not None:
                due = date.fromisoformat(due).isoformat()
        elif word == "--cat":
            category = next(it, None)
        else:
            words.append(word)
    return " ".join(words), due, category


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    state.controller.refresh()
    return ""


ADD_USAGE = "Usage: /add <text> [--due YYYY-MM-DD] [--cat CATEGORY]"


def cmd_add(state: AppState, args: list[str]) -> str:
    try:
        text, due, category = parse_add_args(args)
    except ValueError as e:
        logger.debug("Rejected /add due date: %s", e)
        return ADD_USAGE
    task = state.controller.add_task(text, due_date=due, category=category)
    return "" if task is None else f"Added: {task.text}"


def _first_ref(state: AppState, args: list[str]) -> str | None:
    if not args:
        return None
    return resolve_ref(state, args[0])


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _first_ref(state, args)
    if task_id is None:
        return "Usage: /done <number|id>"
    state.controller.toggle_complete(task_id)
    return ""


def cmd_note(state: AppState, args: list[str]) -> str:
    task_id = _first_ref(state, args)
    if task_id is None:
        return "Usage: /note <number|id>"
    state.controller.edit_note(task_id)
    return ""


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _first_ref(state, args)
    if task_id is None:
        return "Usage: /rm <number|id>"
    state.controller.delete_task(task_id)
    return ""


def cmd_clear(state: AppState, args: list[str]) -> str:
    if not len(state.repository):
        return "Nothing to clear."
    state.controller.clear_all()
    return ""


def cmd_filter(state: AppState, args: list[str]) -> str:
    if not args:
        categories = ", ".join([ALL_FILTER, *getattr(state.settings, "categories", [])])
        return f"Active filter: {state.controller.active_filter}. Available: {categories}"
    state.controller.select_filter(" ".join(args))
    return ""


def cmd_search(state: AppState, args: list[str]) -> str:
    state.controller.search(" ".join(args))
    return ""


def cmd_move(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /move <number|id> <number|id>"
    src = resolve_ref(state, args[0])
    dest = resolve_ref(state, args[1])
    if src is None or dest is None:
        return "Usage: /move <number|id> <number|id>"
    state.controller.start_drag(src)
    state.controller.drop_on(dest)
    return ""


def cmd_quote(state: AppState, args: list[str]) -> str:
    banner = state.quote_banner
    if args and args[0].lower() in ("close", "dismiss", "x"):
        banner.dismiss()
        return "Quote hidden until tomorrow."
    if not banner.is_shown:
        return "Today's quote was already dismissed."
    return f"💬 {banner.message}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <text> [--due YYYY-MM-DD] [--cat CATEGORY].",
    aliases=["a"],
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <number|id>.")
registry.register(
    "note",
    cmd_note,
    help_text="Edit a task note: /note <number|id> (empty clears, '.' keeps).",
)
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <number|id>.", aliases=["del"])
registry.register("clear", cmd_clear, help_text="Delete all tasks.")
registry.register("filter", cmd_filter, help_text="Filter by category: /filter [CATEGORY|All].")
registry.register("search", cmd_search, help_text="Search text/category/note: /search [text].")
registry.register("move", cmd_move, help_text="Move a task before another: /move <from> <to>.")
registry.register("quote", cmd_quote, help_text="Show today's quote: /quote | /quote close.")
