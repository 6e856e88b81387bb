"""Reusable desktop UI components."""

from .widgets import build_stat_card, empty_state

__all__ = ["build_stat_card", "empty_state"]
