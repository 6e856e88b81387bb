"""Pure projection of habit state into records a renderer can draw."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Optional, Sequence

from ..models.habit import Habit, HabitId
from .calendar_day import from_key, last_n_days, to_key
from .ledger import is_completed

CHART_DAYS = 7


@dataclass(frozen=True)
class HabitRow:
    id: HabitId
    name: str
    streak: int
    longest_streak: int
    done_today: bool


@dataclass(frozen=True)
class CalendarCell:
    """One day of the month grid; ``key`` is None for padding cells."""

    key: Optional[str]
    day: Optional[int]
    has_completion: bool = False
    is_today: bool = False


@dataclass(frozen=True)
class MonthCalendar:
    year: int
    month: int
    title: str
    weekday_labels: tuple[str, ...]
    weeks: tuple[tuple[CalendarCell, ...], ...]


@dataclass(frozen=True)
class ChartBar:
    key: str
    label: str
    count: int


@dataclass(frozen=True)
class TrackerView:
    today: str
    rows: tuple[HabitRow, ...]
    longest_streak: int
    calendar: MonthCalendar
    week: tuple[ChartBar, ...]

    @property
    def is_empty(self) -> bool:
        return not self.rows


def _completions_on(habits: Sequence[Habit], key: str) -> int:
    return sum(1 for h in habits if is_completed(h.completed, key))


def build_month_calendar(habits: Sequence[Habit], today_key: str) -> MonthCalendar:
    """Month grid for the month containing ``today_key``, weeks starting Sunday."""

    today = from_key(today_key)
    cal = calendar.Calendar(firstweekday=calendar.SUNDAY)
    weeks = []
    for week in cal.monthdatescalendar(today.year, today.month):
        cells = []
        for day in week:
            if day.month != today.month:
                cells.append(CalendarCell(key=None, day=None))
                continue
            key = to_key(day)
            cells.append(
                CalendarCell(
                    key=key,
                    day=day.day,
                    has_completion=_completions_on(habits, key) > 0,
                    is_today=key == today_key,
                )
            )
        weeks.append(tuple(cells))

    labels = tuple(calendar.day_abbr[(calendar.SUNDAY + i) % 7] for i in range(7))
    title = f"{calendar.month_name[today.month]} {today.year}"
    return MonthCalendar(
        year=today.year, month=today.month, title=title, weekday_labels=labels, weeks=tuple(weeks)
    )


def build_week_chart(habits: Sequence[Habit], today_key: str, days: int = CHART_DAYS) -> tuple[ChartBar, ...]:
    """Completion counts for the ``days`` days ending today, oldest first."""

    return tuple(
        ChartBar(key=key, label=from_key(key).strftime("%a"), count=_completions_on(habits, key))
        for key in last_n_days(today_key, days)
    )


def project(habits: Sequence[Habit], today_key: str) -> TrackerView:
    rows = tuple(
        HabitRow(
            id=h.id,
            name=h.name,
            streak=h.streak,
            longest_streak=h.longest_streak,
            done_today=is_completed(h.completed, today_key),
        )
        for h in habits
    )
    return TrackerView(
        today=today_key,
        rows=rows,
        longest_streak=max((h.longest_streak for h in habits), default=0),
        calendar=build_month_calendar(habits, today_key),
        week=build_week_chart(habits, today_key),
    )


__all__ = [
    "CalendarCell",
    "ChartBar",
    "HabitRow",
    "MonthCalendar",
    "TrackerView",
    "build_month_calendar",
    "build_week_chart",
    "project",
]
