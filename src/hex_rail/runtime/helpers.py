"""Process-level helpers shared by Hex Rail entry points."""

from __future__ import annotations

import logging
import os

from hex_rail.config import LOG_LEVEL_DEFAULT, LOG_LEVEL_ENV_VAR

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: int | str | None = None) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, LOG_LEVEL_DEFAULT)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: int | str | None = None) -> int:
    """Configure root logging once; returns the effective level."""

    resolved = resolve_log_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("hex_rail").setLevel(resolved)
    return resolved
