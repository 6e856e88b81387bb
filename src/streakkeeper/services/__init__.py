"""Domain services: calendar keys, ledger, streak engine and the habit store."""

from .habit_store import ConfirmationToken, HabitStore
from .habits import apply_toggle, recompute_longest

__all__ = ["ConfirmationToken", "HabitStore", "apply_toggle", "recompute_longest"]
