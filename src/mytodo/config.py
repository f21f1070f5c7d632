# src/mytodo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every value has a local default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "MYTODO"

DEFAULT_CATEGORIES = ["Personal", "Work", "Home", "Shopping", "Other"]

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    store_path: Path

    # ---- Presentation ----
    date_format: str
    categories: list[str]
    default_category: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "mytodo")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/mytodo"))
        store_path = _env_path(_k("STORE_PATH"), data_dir / "store.sqlite3")

        # en-GB style day/month/year, as the browser version showed it.
        date_format = _env(_k("DATE_FORMAT"), "%d/%m/%Y")

        categories = _env_list(_k("CATEGORIES"), DEFAULT_CATEGORIES) or list(DEFAULT_CATEGORIES)
        default_category = _env(_k("DEFAULT_CATEGORY"), categories[0])

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            store_path=store_path,
            date_format=date_format,
            categories=categories,
            default_category=default_category,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
