"""Tests for date-key helpers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from streakkeeper.services.calendar_day import (
    day_after,
    day_before,
    from_key,
    is_valid_key,
    last_n_days,
    to_key,
    today_key,
)


def test_today_key_uses_injected_clock(clock):
    assert today_key(clock) == "2024-01-03"


def test_today_key_defaults_to_wall_clock():
    assert today_key() == date.today().isoformat()


def test_late_evening_still_counts_as_same_local_day():
    assert today_key(lambda: datetime(2024, 3, 9, 23, 59, 59)) == "2024-03-09"


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("2024-01-03", "2024-01-02"),
        ("2024-03-01", "2024-02-29"),  # leap year
        ("2023-03-01", "2023-02-28"),
        ("2024-01-01", "2023-12-31"),
        ("2024-05-01", "2024-04-30"),
    ],
)
def test_day_before_crosses_boundaries(key, expected):
    assert day_before(key) == expected


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("2024-02-28", "2024-02-29"),
        ("2024-02-29", "2024-03-01"),
        ("2023-12-31", "2024-01-01"),
        ("2024-06-30", "2024-07-01"),
    ],
)
def test_day_after_crosses_boundaries(key, expected):
    assert day_after(key) == expected


def test_to_key_accepts_date_and_datetime():
    assert to_key(date(2024, 7, 4)) == "2024-07-04"
    assert to_key(datetime(2024, 7, 4, 18, 0)) == "2024-07-04"
    assert from_key("2024-07-04") == date(2024, 7, 4)


@pytest.mark.parametrize(
    ("value", "valid"),
    [
        ("2024-01-03", True),
        ("2024-1-3", False),
        ("2024-02-30", False),
        ("Wed Jan 03 2024", False),
        ("", False),
        (20240103, False),
        (None, False),
    ],
)
def test_is_valid_key(value, valid):
    assert is_valid_key(value) is valid


def test_last_n_days_is_oldest_first():
    assert last_n_days("2024-01-02", 3) == ["2023-12-31", "2024-01-01", "2024-01-02"]
