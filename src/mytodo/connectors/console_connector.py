# src/mytodo/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..render.view import RenderedView

logger = logging.getLogger(__name__)

KEEP_CURRENT = "."


class ConsoleConfirm:
    """Blocking y/N question on stdin. EOF or Ctrl+C means "no"."""

    def confirm(self, message: str) -> bool:
        try:
            answer = input(f"{message} [y/N] ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        return answer in ("y", "yes")


class ConsolePrompt:
    """
    Blocking text prompt on stdin.

    Empty input is an empty answer; "." keeps the default;
    EOF or Ctrl+C cancels (None).
    """

    def prompt(self, message: str, default: str = "") -> str | None:
        shown = f" [current: {default}]" if default else ""
        try:
            answer = input(f"{message}{shown}\n> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        if answer.strip() == KEEP_CURRENT:
            return default
        return answer


class ConsoleNotifier:
    def alert(self, message: str) -> None:
        print(f"[!] {message}")


def format_view(view: RenderedView) -> str:
    if not view.items:
        lines = ["  (no tasks)"]
    else:
        lines = []
        for i, item in enumerate(view.items, start=1):
            mark = "x" if item.completed else " "
            lines.append(f"{i:>3}. [{mark}] {item.text}  ({item.category} | {item.due_label})")
            if item.note:
                lines.append(f"       {item.edit_note.icon} {item.note}")
    lines.append(f"  {view.pending_label}  {view.completed_label}")
    return "\n".join(lines)


def print_view(view: RenderedView) -> None:
    print(format_view(view))


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.repository))
    print("Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    if state.quote_banner.is_shown:
        print(f"💬 {state.quote_banner.message}  (/quote close to hide for today)\n")

    state.controller.refresh()

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        line = user_input if user_input.startswith("/") else f"/add {user_input}"

        try:
            response = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response:
            print(response)

    logger.info("Console connector finished.")
