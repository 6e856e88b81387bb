"""Local calendar-day keys in ``YYYY-MM-DD`` form."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable

Clock = Callable[[], datetime]
"""Source of the current instant; production uses the local wall clock."""

KEY_FORMAT = "%Y-%m-%d"


def system_clock() -> datetime:
    """Return the current local time."""

    return datetime.now()


def to_key(value: date | datetime) -> str:
    """Format a date or datetime as a date-key (local calendar day)."""

    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(KEY_FORMAT)


def from_key(key: str) -> date:
    """Parse a date-key back into a ``date``; raises ValueError when malformed."""

    return datetime.strptime(key, KEY_FORMAT).date()


def is_valid_key(value: object) -> bool:
    """Return True when ``value`` is a well-formed, zero-padded date-key."""

    if not isinstance(value, str) or len(value) != 10:
        return False
    try:
        return to_key(from_key(value)) == value
    except ValueError:
        return False


def today_key(clock: Clock | None = None) -> str:
    """Return the date-key for the current instant of ``clock``."""

    return to_key((clock or system_clock)())


def day_before(key: str) -> str:
    return to_key(from_key(key) - timedelta(days=1))


def day_after(key: str) -> str:
    return to_key(from_key(key) + timedelta(days=1))


def last_n_days(end_key: str, n: int) -> list[str]:
    """Return ``n`` consecutive date-keys ending at ``end_key``, oldest first."""

    end = from_key(end_key)
    return [to_key(end - timedelta(days=offset)) for offset in range(n - 1, -1, -1)]


__all__ = [
    "Clock",
    "KEY_FORMAT",
    "day_after",
    "day_before",
    "from_key",
    "is_valid_key",
    "last_n_days",
    "system_clock",
    "to_key",
    "today_key",
]
