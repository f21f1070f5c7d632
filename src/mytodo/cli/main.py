# src/mytodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState with console-backed prompts,
then runs the console loop in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import (
    ConsoleConfirm,
    ConsoleNotifier,
    ConsolePrompt,
    print_view,
    run_console_loop,
)
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level (the file always gets DEBUG)
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (store=%s, log=%s)...", settings.app_name, settings.store_path, log_file)

    state = create_initial_state(
        settings=settings,
        confirm=ConsoleConfirm(),
        prompt=ConsolePrompt(),
        notifier=ConsoleNotifier(),
        on_render=print_view,
    )

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
