from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "RAYDI_MANUAL_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _get_log_level_from_env(env_var: str = LOG_LEVEL_ENV) -> int:
    """
    Resolve the desired log level from an environment variable.

    Defaults to INFO when the variable is unset or invalid.
    """
    value = os.getenv(env_var, "INFO").upper()
    level = getattr(logging, value, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: int | None = None) -> None:
    """
    Send package diagnostics to standard output.

    Safe to call more than once: when a handler is already installed only the
    level is adjusted.
    """
    if level is None:
        level = _get_log_level_from_env()

    package_logger = logging.getLogger("raydi_manual")
    package_logger.setLevel(level)
    if package_logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)


__all__ = ["configure_logging"]
