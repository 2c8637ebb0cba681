"""Utility helpers shared by the manual configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .models import FilenameCase, ManualConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_list(
    value: object | None, default: cabc.Sequence[str], *, field: str
) -> list[str]:
    """Return ``value`` as a list of non-empty strings, or ``default``."""
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        msg = f"'{field}' must be a list of strings."
        raise ManualConfigError(msg)
    return [text for item in value if (text := str(item).strip())]


def _mapping(value: object | None, *, field: str) -> dict[str, typ.Any]:
    """Return ``value`` as a dict, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, cabc.Mapping):
        msg = f"'{field}' must be a mapping."
        raise ManualConfigError(msg)
    return dict(value)


def _parse_filename_case(value: object | None) -> FilenameCase:
    """Return the FilenameCase named by ``value`` (defaults to camel case)."""
    text = _optional_str(value)
    if text is None:
        return FilenameCase.CAMEL
    try:
        return FilenameCase(text.lower())
    except ValueError as exc:
        choices = ", ".join(case.value for case in FilenameCase)
        msg = f"Unknown filename_case '{text}'. Expected one of: {choices}"
        raise ManualConfigError(msg) from exc


__all__ = [
    "_mapping",
    "_optional_str",
    "_parse_filename_case",
    "_string_list",
]
