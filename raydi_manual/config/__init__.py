"""Load and validate the manual build configuration.

This subpackage parses the optional ``config/manual.yaml`` file, applies the
built-in defaults for anything it leaves out, and produces typed dataclasses
(:class:`ManualConfig`, :class:`LlmsConfig`, :class:`OnePageConfig`) that the
builders consume. The primary entry point is :func:`load_manual_config`.

Examples
--------
>>> from pathlib import Path
>>> from raydi_manual.config import load_manual_config
>>> config = load_manual_config(Path("."))  # doctest: +SKIP
>>> config.source_dir("en")  # doctest: +SKIP
PosixPath('manuals/1.0/en')
"""

from .loader import load_manual_config
from .models import (
    FilenameCase,
    LanguageConfig,
    LlmsConfig,
    ManualConfig,
    ManualConfigError,
    OnePageConfig,
)

__all__ = [
    "FilenameCase",
    "LanguageConfig",
    "LlmsConfig",
    "ManualConfig",
    "ManualConfigError",
    "OnePageConfig",
    "load_manual_config",
]
