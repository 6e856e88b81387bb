"""Tests for dev-mode diagnostics."""

from __future__ import annotations

import logging

from streakkeeper.config import TestConfig
from streakkeeper.devtools import dev_log, in_dev_mode


def _config(dev_mode: bool) -> TestConfig:
    config = TestConfig()
    config.DEV_MODE = dev_mode
    return config


def test_in_dev_mode():
    assert in_dev_mode(_config(True)) is True
    assert in_dev_mode(_config(False)) is False
    assert in_dev_mode(None) is False


def test_dev_log_is_silent_outside_dev_mode(caplog):
    with caplog.at_level(logging.DEBUG, logger="streakkeeper"):
        dev_log(_config(False), "Habit toggled", context={"habit_id": 1})
        dev_log(None, "Habit toggled")

    assert caplog.records == []


def test_dev_log_carries_context_as_extra(caplog):
    with caplog.at_level(logging.INFO, logger="streakkeeper"):
        dev_log(_config(True), "Habit toggled", context={"habit_id": 7, "streak": 2})

    (record,) = caplog.records
    assert record.name == "streakkeeper.devtools"
    assert record.getMessage() == "[DEV] Habit toggled"
    assert (record.habit_id, record.streak) == (7, 2)


def test_dev_log_renames_clashing_keys_and_attaches_exception(caplog):
    error = ValueError("boom")

    with caplog.at_level(logging.INFO, logger="streakkeeper"):
        dev_log(_config(True), "Save failed", exc=error, context={"name": "Read"})

    (record,) = caplog.records
    assert record.ctx_name == "Read"
    assert record.name == "streakkeeper.devtools"
    assert record.exc_info[1] is error
