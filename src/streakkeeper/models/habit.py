"""Habit tracking data structures."""

from __future__ import annotations

from typing import Any, Dict, Union

from sqlmodel import Field, SQLModel

HabitId = Union[int, str]


class Habit(SQLModel):
    """A user-defined habit tracked by daily boolean completion.

    Not a table: habits travel as one snapshot stored in ``AppSetting``.
    """

    id: HabitId
    name: str = Field(min_length=1)
    completed: Dict[str, bool] = Field(default_factory=dict)
    streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)

    def to_record(self) -> dict[str, Any]:
        """Serialize to the persisted snapshot shape."""

        return {
            "id": self.id,
            "name": self.name,
            "completed": dict(self.completed),
            "streak": self.streak,
            "longestStreak": self.longest_streak,
        }
