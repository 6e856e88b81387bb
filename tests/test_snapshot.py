"""Tests for snapshot sanitization and the SQLModel-backed snapshot store."""

from __future__ import annotations

import json

import pytest

from streakkeeper.services.habit_store import HabitStore
from streakkeeper.services.snapshot import sanitize_record, sanitize_records


class TestSanitizeRecord:
    def test_well_formed_record_round_trips(self):
        record = {
            "id": 1700000000000,
            "name": "Meditate",
            "completed": {"2024-01-01": True, "2024-01-02": True},
            "streak": 2,
            "longestStreak": 2,
        }

        habit = sanitize_record(record)

        assert habit.to_record() == record

    @pytest.mark.parametrize(
        "record",
        [
            {"name": "No id"},
            {"id": None, "name": "Null id"},
            {"id": True, "name": "Bool id"},
            {"id": "  ", "name": "Blank id"},
            {"id": [1], "name": "List id"},
            {"id": 1},
            {"id": 1, "name": "   "},
            {"id": 1, "name": 42},
            "not a mapping",
            None,
        ],
    )
    def test_invalid_records_are_dropped(self, record):
        assert sanitize_record(record) is None

    def test_missing_fields_get_defaults(self):
        habit = sanitize_record({"id": "abc", "name": " Walk "})

        assert habit.name == "Walk"
        assert habit.completed == {}
        assert (habit.streak, habit.longest_streak) == (0, 0)

    @pytest.mark.parametrize("bad", ["3", None, [], {}, True, float("nan"), float("inf")])
    def test_non_numeric_counters_become_zero(self, bad):
        habit = sanitize_record({"id": 1, "name": "Walk", "streak": bad, "longestStreak": bad})

        assert (habit.streak, habit.longest_streak) == (0, 0)

    def test_numeric_counters_are_coerced(self):
        habit = sanitize_record({"id": 1.0, "name": "Walk", "streak": 2.0, "longestStreak": -4})

        assert habit.id == 1
        assert (habit.streak, habit.longest_streak) == (2, 0)

    def test_ledger_keeps_only_well_formed_completed_days(self):
        habit = sanitize_record(
            {
                "id": 1,
                "name": "Walk",
                "completed": {
                    "2024-01-01": True,
                    "2024-01-02": False,
                    "2024-13-01": True,
                    "yesterday": True,
                    "2024-01-05": 1,
                },
            }
        )

        assert habit.completed == {"2024-01-01": True, "2024-01-05": True}

    def test_non_mapping_ledger_becomes_empty(self):
        habit = sanitize_record({"id": 1, "name": "Walk", "completed": ["2024-01-01"]})

        assert habit.completed == {}

    def test_legacy_last_completed_seeds_ledger(self):
        habit = sanitize_record(
            {"id": 1, "name": "Walk", "streak": 3, "lastCompleted": "Wed Jan 03 2024", "completedToday": True}
        )

        assert habit.completed == {"2024-01-01": True, "2024-01-02": True, "2024-01-03": True}
        assert habit.streak == 3
        assert habit.longest_streak == 3

    def test_legacy_record_without_streak_seeds_one_day(self):
        habit = sanitize_record({"id": 1, "name": "Walk", "lastCompleted": "Wed Jan 03 2024"})

        assert habit.completed == {"2024-01-03": True}
        assert (habit.streak, habit.longest_streak) == (0, 1)

    def test_unparseable_legacy_date_gives_empty_ledger(self):
        habit = sanitize_record({"id": 1, "name": "Walk", "streak": 5, "lastCompleted": "someday"})

        assert habit.completed == {}

    def test_longest_is_raised_to_what_the_ledger_shows(self):
        habit = sanitize_record(
            {
                "id": 1,
                "name": "Walk",
                "completed": {"2024-01-01": True, "2024-01-02": True, "2024-01-03": True},
                "streak": 3,
                "longestStreak": 1,
            }
        )

        assert habit.longest_streak == 3


class TestSanitizeRecords:
    @pytest.mark.parametrize("raw", [None, "[]", {"id": 1, "name": "x"}, 42])
    def test_non_list_payload_is_empty(self, raw):
        assert sanitize_records(raw) == []

    def test_duplicate_ids_keep_first(self):
        habits = sanitize_records([{"id": 1, "name": "First"}, {"id": 1, "name": "Second"}])

        assert [h.name for h in habits] == ["First"]

    def test_mixed_payload_keeps_order_of_survivors(self):
        habits = sanitize_records(
            [{"id": 3, "name": "C"}, {"bogus": True}, {"id": 1, "name": "A"}, {"id": 2, "name": ""}]
        )

        assert [h.id for h in habits] == [3, 1]


class TestSQLModelSnapshotRepository:
    def test_missing_snapshot_loads_empty(self, sql_snapshot_repo):
        assert sql_snapshot_repo.load_snapshot() == []

    def test_corrupted_json_loads_empty(self, settings_repo, sql_snapshot_repo):
        settings_repo.set("habits", "{not json")

        assert sql_snapshot_repo.load_snapshot() == []

    def test_store_survives_restart(self, sql_snapshot_repo, clock, id_factory):
        store = HabitStore(sql_snapshot_repo, clock=clock, id_factory=id_factory)
        read = store.add_habit("Read")
        store.toggle_completion(read.id, "2024-01-02")
        store.toggle_completion(read.id)
        store.add_habit("Run")

        reloaded = HabitStore(sql_snapshot_repo, clock=clock)

        assert [h.to_record() for h in reloaded.habits] == [h.to_record() for h in store.habits]
        assert reloaded.get(read.id).streak == 2

    def test_snapshot_is_stored_as_json_under_key(self, settings_repo, sql_snapshot_repo, clock, id_factory):
        store = HabitStore(sql_snapshot_repo, clock=clock, id_factory=id_factory)
        store.add_habit("Read")

        stored = settings_repo.get("habits")

        assert json.loads(stored.value) == [
            {"id": 1, "name": "Read", "completed": {}, "streak": 0, "longestStreak": 0}
        ]

    def test_settings_delete(self, settings_repo):
        settings_repo.set("theme_mode", "light")
        settings_repo.delete("theme_mode")
        settings_repo.delete("theme_mode")

        assert settings_repo.get("theme_mode") is None
