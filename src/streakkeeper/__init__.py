"""StreakKeeper: daily habit tracking with streaks."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .services.habit_store import ConfirmationToken, HabitStore

__all__ = ["BaseConfig", "ConfirmationToken", "DevConfig", "HabitStore"]
