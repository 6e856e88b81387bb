"""Concrete repository implementations."""

from .settings import SQLModelSettingsRepository
from .snapshot import InMemorySnapshotRepository, SQLModelSnapshotRepository

__all__ = [
    "InMemorySnapshotRepository",
    "SQLModelSettingsRepository",
    "SQLModelSnapshotRepository",
]
