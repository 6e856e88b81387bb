"""Dialog components."""

from .habit_dialog import show_delete_dialog, show_rename_dialog

__all__ = ["show_delete_dialog", "show_rename_dialog"]
