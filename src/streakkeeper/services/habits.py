"""Streak engine: derive current and longest streaks from a completion ledger."""

from __future__ import annotations

from typing import Mapping

from ..logging_config import get_logger
from ..models.habit import Habit
from .calendar_day import day_after, day_before
from .ledger import completed_keys_sorted, is_completed, set_completed, unset_completed

logger = get_logger(__name__)


def recompute_longest(ledger: Mapping[str, bool]) -> int:
    """Return the longest run of consecutive completed days in ``ledger``.

    Full rescan on every call, so the result never depends on how the
    ledger was built up. 0 for an empty ledger, otherwise at least 1.
    """

    keys = completed_keys_sorted(ledger)
    if not keys:
        return 0

    longest = run = 1
    for previous, key in zip(keys, keys[1:]):
        if day_after(previous) == key:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
    return longest


def run_ending_at(ledger: Mapping[str, bool], key: str) -> int:
    """Count consecutive completed days ending at ``key`` (0 if ``key`` is open)."""

    run = 0
    cursor = key
    while is_completed(ledger, cursor):
        run += 1
        cursor = day_before(cursor)
    return run


def apply_toggle(habit: Habit, today_key: str, mark_completed: bool) -> Habit:
    """Mark or unmark ``today_key`` on ``habit`` and recompute both streaks.

    Marking extends the run that ends yesterday (or starts a new run of 1);
    unmarking drops the current streak to 0. ``longest_streak`` always comes
    from :func:`recompute_longest`.
    """

    previous = (habit.streak, habit.longest_streak)
    if mark_completed:
        set_completed(habit.completed, today_key)
        yesterday = day_before(today_key)
        if is_completed(habit.completed, yesterday):
            habit.streak = run_ending_at(habit.completed, yesterday) + 1
        else:
            habit.streak = 1
    else:
        unset_completed(habit.completed, today_key)
        habit.streak = 0

    habit.longest_streak = recompute_longest(habit.completed)
    logger.debug(
        "Streaks recomputed",
        extra={
            "habit_id": habit.id,
            "day": today_key,
            "marked": mark_completed,
            "before": previous,
            "after": (habit.streak, habit.longest_streak),
        },
    )
    return habit


def refresh_current_streak(habit: Habit, today_key: str) -> bool:
    """Zero a stale current streak once a full day has been missed.

    A streak ending yesterday is still alive today. Returns True when the
    cached value changed.
    """

    if is_completed(habit.completed, today_key) or is_completed(
        habit.completed, day_before(today_key)
    ):
        return False
    if habit.streak == 0:
        return False
    habit.streak = 0
    return True


__all__ = ["apply_toggle", "recompute_longest", "refresh_current_streak", "run_ending_at"]
