# src/mytodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..storage.task_storage import TaskStorage
from ..tasks.task_repository import TaskRepository
from .controller import InteractionController
from .quotes import QuoteBanner


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace).
    settings: Any

    storage: TaskStorage
    repository: TaskRepository
    controller: InteractionController
    quote_banner: QuoteBanner
