"""Repository protocol definitions for domain layer."""

from .settings import SettingsRepository
from .snapshot import SnapshotRepository

__all__ = ["SettingsRepository", "SnapshotRepository"]
