"""Per-habit completion ledger: a mapping of date-key to completion flag.

Absence of a key means "not completed". Explicit ``False`` values are
tolerated and read the same as absence. Keys are not validated here;
callers pass keys produced by :mod:`calendar_day`.
"""

from __future__ import annotations

from typing import Dict, Mapping, MutableMapping

Ledger = Dict[str, bool]


def is_completed(ledger: Mapping[str, bool], key: str) -> bool:
    return bool(ledger.get(key, False))


def set_completed(ledger: MutableMapping[str, bool], key: str) -> None:
    """Mark ``key`` as completed. Idempotent."""

    ledger[key] = True


def unset_completed(ledger: MutableMapping[str, bool], key: str) -> None:
    """Remove ``key`` from the ledger. Idempotent; missing keys are ignored."""

    ledger.pop(key, None)


def completed_keys_sorted(ledger: Mapping[str, bool]) -> list[str]:
    """Return completed date-keys in ascending (chronological) order."""

    # Fixed-width YYYY-MM-DD keys sort lexically in date order.
    return sorted(key for key, done in ledger.items() if done)


__all__ = [
    "Ledger",
    "completed_keys_sorted",
    "is_completed",
    "set_completed",
    "unset_completed",
]
