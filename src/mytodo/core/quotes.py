# src/mytodo/core/quotes.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from enum import StrEnum
from typing import Final

from ..storage.task_storage import TaskStorage

logger = logging.getLogger(__name__)

QUOTES: Final[tuple[str, ...]] = (
    "Small progress every day leads to big results.",
    "Do it for the future you will thank today.",
    "One step is better than no step.",
    "Consistency beats intensity.",
    "Start small. Think big. Act now.",
    "Make it happen — one task at a time.",
    "Progress, not perfection.",
)


def daily_quote(today: date) -> str:
    """Same day of month -> same message; the rotation wraps with modulo."""
    return QUOTES[today.day % len(QUOTES)]


class BannerState(StrEnum):
    SHOWN = "shown"
    DISMISSED = "dismissed"


class QuoteBanner:
    """
    Daily banner, closable once per day.

    The dismissal marker is the ISO date at the moment of dismissal; on the
    next start the banner is shown again unless the marker equals that day.
    The message is picked once, at load time.
    """

    def __init__(
        self,
        storage: TaskStorage,
        state: BannerState,
        message: str,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self.state = state
        self.message = message

    @classmethod
    def load(cls, storage: TaskStorage, *, clock: Callable[[], date] = date.today) -> QuoteBanner:
        today = clock()
        closed = storage.get_quote_closed_date()
        state = BannerState.DISMISSED if closed == today.isoformat() else BannerState.SHOWN
        logger.debug("Quote banner state=%s closed_marker=%s", state, closed)
        return cls(storage, state, daily_quote(today), clock=clock)

    @property
    def is_shown(self) -> bool:
        return self.state is BannerState.SHOWN

    def dismiss(self) -> None:
        self._storage.set_quote_closed_date(self._clock().isoformat())
        self.state = BannerState.DISMISSED
