# src/mytodo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and the presentation host swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..render.view import RenderedView


class KeyValueStore(Protocol):
    """Durable string-keyed store (the browser's localStorage, in spirit)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...


class ConfirmProvider(Protocol):
    """Blocking yes/no question to the user."""

    def confirm(self, message: str) -> bool: ...


class TextPromptProvider(Protocol):
    """
    Blocking free-text question to the user.

    Returns the entered text, or None when the user cancels.
    """

    def prompt(self, message: str, default: str = "") -> str | None: ...


class Notifier(Protocol):
    """Synchronous user-facing message (validation errors)."""

    def alert(self, message: str) -> None: ...


class RenderListener(Protocol):
    def __call__(self, view: RenderedView) -> None: ...
