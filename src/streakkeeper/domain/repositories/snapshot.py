"""Snapshot persistence protocol."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from ...models.habit import Habit


class SnapshotRepository(Protocol):
    """Loads and saves the full habit list as one snapshot."""

    def load_snapshot(self) -> Any:
        """Return the raw persisted records (possibly malformed)."""
        ...

    def save_snapshot(self, habits: Sequence[Habit]) -> None:
        """Replace the persisted snapshot with ``habits``."""
        ...
