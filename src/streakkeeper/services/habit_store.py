"""Habit store: the aggregate the UI and CLI drive.

Owns the ordered habit list, applies every mutation through the streak
engine, and writes the whole list back through the snapshot repository
after each change. Invalid input (blank names, unknown ids, stale delete
tokens) is a silent no-op.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Callable, Optional

from ..domain.repositories.snapshot import SnapshotRepository
from ..logging_config import get_logger
from ..models.habit import Habit, HabitId
from .calendar_day import Clock, system_clock, today_key as clock_today_key
from .habits import apply_toggle, refresh_current_streak
from .ledger import is_completed
from .snapshot import sanitize_records
from .view_model import TrackerView, project

logger = get_logger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class ConfirmationToken:
    """Handle returned by :meth:`HabitStore.request_delete`."""

    value: str
    habit_id: HabitId


class HabitStore:
    """In-memory habit list with write-through persistence."""

    def __init__(
        self,
        snapshot_repo: SnapshotRepository,
        *,
        clock: Clock | None = None,
        id_factory: Callable[[], HabitId] | None = None,
    ):
        self.snapshot_repo = snapshot_repo
        self.clock = clock or system_clock
        self.id_factory = id_factory or _new_id
        self._pending_deletes: dict[str, HabitId] = {}
        self._habits: list[Habit] = sanitize_records(snapshot_repo.load_snapshot())
        logger.info("Habit store loaded", extra={"habits": len(self._habits)})

    # ------------------------------------------------------------------ reads
    @property
    def habits(self) -> list[Habit]:
        """Habits in insertion order (a new list; the records are live)."""
        return list(self._habits)

    def today_key(self) -> str:
        return clock_today_key(self.clock)

    def get(self, habit_id: HabitId) -> Optional[Habit]:
        return next((h for h in self._habits if h.id == habit_id), None)

    def longest_streak_across_all(self) -> int:
        return max((h.longest_streak for h in self._habits), default=0)

    def completions_on(self, date_key: str) -> int:
        """Number of habits completed on ``date_key``."""
        return sum(1 for h in self._habits if is_completed(h.completed, date_key))

    def view(self, today: str | None = None) -> TrackerView:
        """Project the current state for a renderer."""
        return project(self._habits, today or self.today_key())

    # -------------------------------------------------------------- mutations
    def add_habit(self, name: str) -> Optional[Habit]:
        """Create a habit; blank names are rejected with ``None``."""

        clean = (name or "").strip()
        if not clean:
            logger.debug("Rejected blank habit name")
            return None

        habit_id = self.id_factory()
        while self.get(habit_id) is not None:
            habit_id = self.id_factory()

        habit = Habit(id=habit_id, name=clean)
        self._habits.append(habit)
        logger.info("Habit added", extra={"habit_id": habit.id, "habit_name": clean})
        self.save()
        return habit

    def toggle_completion(self, habit_id: HabitId, today: str | None = None) -> Optional[Habit]:
        """Flip today's completion for ``habit_id`` and recompute its streaks."""

        habit = self.get(habit_id)
        if habit is None:
            logger.debug("Toggle ignored for unknown habit", extra={"habit_id": habit_id})
            return None

        day = today or self.today_key()
        mark = not is_completed(habit.completed, day)
        apply_toggle(habit, day, mark)
        logger.info(
            "Habit completion toggled",
            extra={"habit_id": habit.id, "day": day, "completed": mark, "streak": habit.streak},
        )
        self.save()
        return habit

    def rename_habit(self, habit_id: HabitId, new_name: str) -> Optional[Habit]:
        clean = (new_name or "").strip()
        habit = self.get(habit_id)
        if habit is None or not clean:
            logger.debug("Rename ignored", extra={"habit_id": habit_id})
            return None
        habit.name = clean
        logger.info("Habit renamed", extra={"habit_id": habit.id, "habit_name": clean})
        self.save()
        return habit

    def delete_habit(self, habit_id: HabitId) -> bool:
        """Remove a habit immediately. Returns False for unknown ids."""

        habit = self.get(habit_id)
        if habit is None:
            logger.debug("Delete ignored for unknown habit", extra={"habit_id": habit_id})
            return False
        self._habits.remove(habit)
        self._pending_deletes = {
            token: hid for token, hid in self._pending_deletes.items() if hid != habit_id
        }
        logger.info("Habit deleted", extra={"habit_id": habit_id})
        self.save()
        return True

    def request_delete(self, habit_id: HabitId) -> Optional[ConfirmationToken]:
        """Start a confirmed delete; the caller asks the user, then confirms."""

        if self.get(habit_id) is None:
            return None
        token = ConfirmationToken(value=uuid.uuid4().hex, habit_id=habit_id)
        self._pending_deletes[token.value] = habit_id
        return token

    def confirm_delete(self, token: ConfirmationToken) -> bool:
        """Finish a delete started by :meth:`request_delete`. Tokens are single-use."""

        habit_id = self._pending_deletes.pop(token.value, None)
        if habit_id is None or habit_id != token.habit_id:
            logger.debug("Stale delete confirmation", extra={"token": token.value})
            return False
        return self.delete_habit(habit_id)

    def cancel_delete(self, token: ConfirmationToken) -> None:
        self._pending_deletes.pop(token.value, None)

    def refresh(self, today: str | None = None) -> bool:
        """Drop current streaks that lapsed before ``today``; persist if anything changed."""

        day = today or self.today_key()
        changed = [h.id for h in self._habits if refresh_current_streak(h, day)]
        if changed:
            logger.info("Lapsed streaks reset", extra={"day": day, "habit_ids": changed})
            self.save()
        return bool(changed)

    # ------------------------------------------------------------ persistence
    def save(self) -> None:
        """Write the full habit list through to the snapshot repository.

        Best effort: a failed write is logged and the in-memory change stands.
        """

        try:
            self.snapshot_repo.save_snapshot(self._habits)
        except Exception:
            logger.exception("Failed to persist habit snapshot", extra={"habits": len(self._habits)})


__all__ = ["ConfirmationToken", "HabitStore"]
