"""Sanitization of persisted habit snapshots.

This is the only input-validation boundary: whatever the persistence layer
hands back, the store only ever sees well-formed :class:`Habit` records.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any, Iterable, Mapping, Optional

from ..logging_config import get_logger
from ..models.habit import Habit, HabitId
from .calendar_day import is_valid_key, to_key
from .habits import recompute_longest

logger = get_logger(__name__)

# Legacy records carried only the last completion as a JS ``toDateString()``.
_LEGACY_DATE_FORMAT = "%a %b %d %Y"
_LEGACY_MAX_DAYS = 3660


def _clean_id(value: Any) -> Optional[HabitId]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _clean_count(value: Any) -> int:
    """Coerce a streak counter; anything non-numeric becomes 0."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(0, int(value))


def _clean_ledger(record: Mapping[str, Any]) -> dict[str, bool]:
    raw = record.get("completed")
    if isinstance(raw, Mapping):
        return {key: True for key, done in raw.items() if done and is_valid_key(key)}

    # Legacy streaks only counted consecutive days, so the run ending at
    # lastCompleted can be rebuilt from the counter.
    legacy = record.get("lastCompleted")
    if isinstance(legacy, str):
        try:
            last = datetime.strptime(legacy, _LEGACY_DATE_FORMAT).date()
        except ValueError:
            return {}
        run = min(max(1, _clean_count(record.get("streak"))), _LEGACY_MAX_DAYS)
        return {to_key(last - timedelta(days=offset)): True for offset in range(run)}
    return {}


def sanitize_record(record: Any) -> Optional[Habit]:
    """Return a clean Habit, or None when the record must be dropped."""

    if not isinstance(record, Mapping):
        return None
    habit_id = _clean_id(record.get("id"))
    name = record.get("name")
    if habit_id is None or not isinstance(name, str) or not name.strip():
        return None

    completed = _clean_ledger(record)
    return Habit(
        id=habit_id,
        name=name.strip(),
        completed=completed,
        streak=_clean_count(record.get("streak")),
        # Never report less than the ledger itself proves.
        longest_streak=max(_clean_count(record.get("longestStreak")), recompute_longest(completed)),
    )


def sanitize_records(raw: Any) -> list[Habit]:
    """Sanitize a loaded snapshot into a list of habits, dropping bad records."""

    if raw is None:
        return []
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
        logger.warning("Snapshot is not a list of records; starting empty", extra={"type": type(raw).__name__})
        return []

    habits: list[Habit] = []
    seen: set[HabitId] = set()
    dropped = 0
    for record in raw:
        habit = sanitize_record(record)
        if habit is None or habit.id in seen:
            dropped += 1
            continue
        seen.add(habit.id)
        habits.append(habit)

    if dropped:
        logger.warning("Dropped malformed habit records", extra={"dropped": dropped, "kept": len(habits)})
    return habits


__all__ = ["sanitize_record", "sanitize_records"]
