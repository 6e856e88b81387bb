"""SQLModel exports."""

from .habit import Habit, HabitId
from .settings import AppSetting

__all__ = ["AppSetting", "Habit", "HabitId"]
