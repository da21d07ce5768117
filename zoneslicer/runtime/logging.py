"""Slicer logger namespace."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from zoneslicer.runtime.config import resolve_log_level_name

PACKAGE_LOGGER_NAME = "zoneslicer"


def apply_slicer_log_level(*, env: Mapping[str, str] | None = None) -> int | None:
    """Apply ZONESLICER_LOG_LEVEL to the package logger; root handlers are left alone."""
    level_name = resolve_log_level_name(env=env)
    if level_name is None:
        return None
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return None
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)
    return level


def get_slicer_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name != PACKAGE_LOGGER_NAME and not name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    apply_slicer_log_level()
    return logging.getLogger(name)
