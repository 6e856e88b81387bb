"""Pytest configuration and shared fixtures for StreakKeeper tests.

Provides an isolated SQLite database, a fixed clock and habit/store factories
so tests never touch the real data directory.
"""

from __future__ import annotations

import itertools
import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from streakkeeper.infra.database import create_session_factory
from streakkeeper.infra.repositories import (
    InMemorySnapshotRepository,
    SQLModelSettingsRepository,
    SQLModelSnapshotRepository,
)
from streakkeeper.models import AppSetting, Habit  # noqa: F401 - registers tables
from streakkeeper.services.habit_store import HabitStore

# 2024-01-03 is "today" throughout the suite.
FIXED_NOW = datetime(2024, 1, 3, 9, 30)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point config at a temp data dir and database for every test."""

    monkeypatch.setenv("STREAKKEEPER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("STREAKKEEPER_DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")
    monkeypatch.setenv("STREAKKEEPER_DEV_MODE", "false")
    return tmp_path


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test."""

    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the app builds."""

    return create_session_factory(db_engine)


@pytest.fixture
def settings_repo(session_factory):
    return SQLModelSettingsRepository(session_factory)


@pytest.fixture
def sql_snapshot_repo(settings_repo):
    return SQLModelSnapshotRepository(settings_repo, key="habits")


# =============================================================================
# Clock and Store Fixtures
# =============================================================================


@pytest.fixture
def clock():
    """Clock frozen at 2024-01-03 09:30 local time."""

    return lambda: FIXED_NOW


@pytest.fixture
def memory_repo():
    return InMemorySnapshotRepository()


@pytest.fixture
def id_factory():
    """Deterministic habit ids: 1, 2, 3, ..."""

    counter = itertools.count(1)
    return lambda: next(counter)


@pytest.fixture
def store(memory_repo, clock, id_factory):
    return HabitStore(memory_repo, clock=clock, id_factory=id_factory)


@pytest.fixture
def habit_factory():
    """Factory for Habit records with a pre-filled ledger."""

    counter = itertools.count(100)

    def _create_habit(
        name: str = "Exercise",
        days: list[str] | None = None,
        streak: int = 0,
        longest_streak: int = 0,
    ) -> Habit:
        return Habit(
            id=next(counter),
            name=name,
            completed={day: True for day in days or []},
            streak=streak,
            longest_streak=longest_streak,
        )

    return _create_habit
