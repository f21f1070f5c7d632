# src/mytodo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the store, repository, controller and quote banner into AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..config import get_settings
from ..core.controller import InteractionController
from ..core.ports import ConfirmProvider, KeyValueStore, Notifier, RenderListener, TextPromptProvider
from ..core.quotes import QuoteBanner
from ..core.state import AppState
from ..storage.kv_store import SQLiteKeyValueStore
from ..storage.task_storage import TaskStorage
from ..tasks.task_repository import TaskRepository

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    confirm: ConfirmProvider,
    prompt: TextPromptProvider,
    notifier: Notifier,
    on_render: RenderListener | None = None,
    settings=None,
    kv: KeyValueStore | None = None,
    clock: Callable[[], date] = date.today,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings, the key-value store and the clock injectable makes the app
    easy to test. If settings is None, falls back to get_settings(); if kv is
    None, a SQLite store at settings.store_path is opened.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = SQLiteKeyValueStore(settings.store_path)

    storage = TaskStorage(kv)
    repository = TaskRepository(storage)
    controller = InteractionController(
        repository,
        confirm=confirm,
        prompt=prompt,
        notifier=notifier,
        on_render=on_render,
        default_category=settings.default_category,
        date_format=settings.date_format,
    )
    quote_banner = QuoteBanner.load(storage, clock=clock)

    logger.debug("State ready tasks=%d quote_shown=%s", len(repository), quote_banner.is_shown)
    return AppState(
        settings=settings,
        storage=storage,
        repository=repository,
        controller=controller,
        quote_banner=quote_banner,
    )
