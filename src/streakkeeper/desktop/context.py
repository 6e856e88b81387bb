"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import flet as ft
from sqlmodel import Session

from ..config import BaseConfig
from ..infra.database import bootstrap_database
from ..infra.repositories import SQLModelSettingsRepository, SQLModelSnapshotRepository
from ..services.calendar_day import Clock
from ..services.habit_store import HabitStore


@dataclass
class AppContext:
    """Centralized application context with services and state."""

    config: BaseConfig
    session_factory: Callable[[], Session]

    settings_repo: SQLModelSettingsRepository
    store: HabitStore

    theme_mode: ft.ThemeMode

    # Set once the page exists
    page: Optional[ft.Page] = None
    dev_mode: bool = False

    def save_theme(self, mode: ft.ThemeMode) -> None:
        """Remember the theme choice across sessions."""

        self.theme_mode = mode
        value = "light" if mode == ft.ThemeMode.LIGHT else "dark"
        self.settings_repo.set(self.config.THEME_KEY, value, description="Desktop theme")


def load_theme(settings_repo: SQLModelSettingsRepository, key: str) -> ft.ThemeMode:
    persisted = settings_repo.get(key)
    saved = (persisted.value if persisted else "").strip().lower()
    return ft.ThemeMode.LIGHT if saved == "light" else ft.ThemeMode.DARK


def create_app_context(
    config: Optional[BaseConfig] = None, *, clock: Clock | None = None
) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()

    _engine, session_factory = bootstrap_database(config)
    settings_repo = SQLModelSettingsRepository(session_factory)
    snapshot_repo = SQLModelSnapshotRepository(settings_repo, key=config.SNAPSHOT_KEY)
    store = HabitStore(snapshot_repo, clock=clock)
    store.refresh()

    return AppContext(
        config=config,
        dev_mode=config.DEV_MODE,
        session_factory=session_factory,
        settings_repo=settings_repo,
        store=store,
        theme_mode=load_theme(settings_repo, config.THEME_KEY),
    )
