"""Runtime helpers for Hex Rail."""

from .helpers import configure_logging, resolve_log_level

__all__ = [
    "configure_logging",
    "resolve_log_level",
]
