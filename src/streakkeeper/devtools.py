"""Dev-mode diagnostics routed through the package logger."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .config import BaseConfig
from .logging_config import get_logger

logger = get_logger("devtools")

# LogRecord refuses extra keys that shadow its own attributes.
_RESERVED = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


def in_dev_mode(config: BaseConfig | None) -> bool:
    """Return True when dev mode logging is enabled."""

    return bool(getattr(config, "DEV_MODE", False)) if config is not None else False


def dev_log(
    config: BaseConfig | None,
    message: str,
    *,
    exc: BaseException | None = None,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Log a ``[DEV]`` diagnostic with its context when dev mode is enabled.

    Context entries become ``extra`` fields on the record, so they land in the
    JSON log file next to the message. Keys that clash with LogRecord
    attributes are prefixed with ``ctx_``.
    """

    if not in_dev_mode(config):
        return

    extra = {(f"ctx_{key}" if key in _RESERVED else key): value for key, value in (context or {}).items()}
    logger.info("[DEV] %s", message, extra=extra, exc_info=exc)
