# tests/conftest.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from mytodo.cli.bootstrap import create_initial_state
from mytodo.core.controller import InteractionController
from mytodo.core.state import AppState
from mytodo.storage.task_storage import STORAGE_KEY, TaskStorage
from mytodo.tasks.task_repository import TaskRepository

from .fakes import (
    FakeKeyValueStore,
    RecordingNotifier,
    RecordingRenderer,
    ScriptedConfirm,
    ScriptedPrompt,
)

TODAY = date(2024, 3, 15)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the composition root.

    A SimpleNamespace rather than the real config keeps tests independent
    of the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="mytodo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        store_path=tmp_path / "store.sqlite3",
        date_format="%d/%m/%Y",
        categories=["Personal", "Work", "Home"],
        default_category="Personal",
    )


@pytest.fixture()
def kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def storage(kv: FakeKeyValueStore) -> TaskStorage:
    return TaskStorage(kv)


def seed(kv: FakeKeyValueStore, *records: dict) -> None:
    """Put raw task records into the store as the browser app would have."""
    full = [
        {"dueDate": "", "note": "", "completed": False, "category": "Home", **r} for r in records
    ]
    kv.data[STORAGE_KEY] = json.dumps(full)


@pytest.fixture()
def repo(storage: TaskStorage) -> TaskRepository:
    return TaskRepository(storage)


@pytest.fixture()
def confirm() -> ScriptedConfirm:
    return ScriptedConfirm()


@pytest.fixture()
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def controller(
    repo: TaskRepository,
    confirm: ScriptedConfirm,
    prompt: ScriptedPrompt,
    notifier: RecordingNotifier,
    renderer: RecordingRenderer,
) -> InteractionController:
    return InteractionController(
        repo,
        confirm=confirm,
        prompt=prompt,
        notifier=notifier,
        on_render=renderer,
        default_category="Personal",
    )


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    kv: FakeKeyValueStore,
    confirm: ScriptedConfirm,
    prompt: ScriptedPrompt,
    notifier: RecordingNotifier,
    renderer: RecordingRenderer,
) -> AppState:
    """AppState wired with deterministic fakes and a fixed date."""
    return create_initial_state(
        settings=settings,
        kv=kv,
        confirm=confirm,
        prompt=prompt,
        notifier=notifier,
        on_render=renderer,
        clock=lambda: TODAY,
    )
