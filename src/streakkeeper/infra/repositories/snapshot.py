"""Habit snapshot repositories."""

from __future__ import annotations

import copy
import json
from typing import Any, Sequence

from ...domain.repositories.settings import SettingsRepository
from ...logging_config import get_logger
from ...models.habit import Habit

logger = get_logger(__name__)


class SQLModelSnapshotRepository:
    """Stores the habit list as one JSON document under a settings key."""

    def __init__(self, settings_repo: SettingsRepository, key: str = "habits"):
        self.settings_repo = settings_repo
        self.key = key

    def load_snapshot(self) -> Any:
        setting = self.settings_repo.get(self.key)
        if setting is None or not setting.value:
            return []
        try:
            return json.loads(setting.value)
        except json.JSONDecodeError:
            logger.warning("Stored habit snapshot is not valid JSON; ignoring it", extra={"key": self.key})
            return []

    def save_snapshot(self, habits: Sequence[Habit]) -> None:
        payload = json.dumps([habit.to_record() for habit in habits])
        self.settings_repo.set(self.key, payload, description="Habit snapshot")
        logger.debug("Habit snapshot saved", extra={"key": self.key, "habits": len(habits)})


class InMemorySnapshotRepository:
    """Keeps the snapshot in process; used by tests and throwaway sessions."""

    def __init__(self, records: Any = None):
        self.records: Any = [] if records is None else records
        self.saves = 0

    def load_snapshot(self) -> Any:
        return copy.deepcopy(self.records)

    def save_snapshot(self, habits: Sequence[Habit]) -> None:
        self.records = [habit.to_record() for habit in habits]
        self.saves += 1


__all__ = ["InMemorySnapshotRepository", "SQLModelSnapshotRepository"]
