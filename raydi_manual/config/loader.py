"""Load the manual build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from raydi_manual import _constants

from .helpers import _mapping, _optional_str, _parse_filename_case, _string_list
from .models import (
    LanguageConfig,
    LlmsConfig,
    ManualConfig,
    ManualConfigError,
    OnePageConfig,
)


def load_manual_config(root: Path, path: Path | None = None) -> ManualConfig:
    """Load the configuration describing where manual sources and outputs live.

    Parameters
    ----------
    root : Path
        Documentation project root; relative paths are resolved against it.
    path : Path or None, optional
        Configuration file. When ``None`` the default
        ``config/manual.yaml`` under ``root`` is used if it exists, and the
        built-in defaults otherwise.

    Returns
    -------
    ManualConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If an explicitly requested configuration file does not exist.
    ManualConfigError
        If the YAML structure or a setting is invalid.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_manual_config(Path("/nonexistent"))
    >>> config.llms.sections[0]
    'Docs'
    >>> list(config.one_page.languages)
    ['en', 'ja']
    """
    raw: dict[str, typ.Any] = {}
    if path is None:
        default_path = root / _constants.DEFAULT_CONFIG_PATH
        if default_path.is_file():
            raw = _read_yaml(default_path)
    else:
        config_path = path if path.is_absolute() else root / path
        if not config_path.exists():
            msg = f"Configuration file '{config_path}' not found."
            raise FileNotFoundError(msg)
        raw = _read_yaml(config_path)

    defaults = _mapping(raw.get("defaults"), field="defaults")
    version = _optional_str(defaults.get("version")) or _constants.DEFAULT_VERSION
    manuals_dir = Path(defaults.get("manuals_dir", _constants.DEFAULT_MANUALS_DIR))
    site_dir = Path(defaults.get("site_dir", _constants.DEFAULT_SITE_DIR))

    return ManualConfig(
        root=root,
        version=version,
        manuals_dir=manuals_dir,
        site_dir=site_dir,
        llms=_build_llms_config(_mapping(raw.get("llms"), field="llms"), version),
        one_page=_build_one_page_config(
            _mapping(raw.get("one_page"), field="one_page"), version
        ),
    )


def _read_yaml(path: Path) -> dict[str, typ.Any]:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ManualConfigError(msg)
    return dict(loaded)


def _build_llms_config(payload: dict[str, typ.Any], version: str) -> LlmsConfig:
    """Build the llms-full settings from the ``llms`` mapping."""
    default_prefix = _constants.LINK_PREFIX_TEMPLATE.format(version=version)
    return LlmsConfig(
        index=Path(payload.get("index", _constants.LLMS_INDEX)),
        output=Path(payload.get("output", _constants.LLMS_OUTPUT)),
        sections=_string_list(
            payload.get("sections"),
            _constants.LINKABLE_SECTIONS,
            field="llms.sections",
        ),
        toc_only_sections=_string_list(
            payload.get("toc_only_sections"),
            _constants.TOC_ONLY_SECTIONS,
            field="llms.toc_only_sections",
        ),
        link_prefixes=_string_list(
            payload.get("link_prefixes"), (default_prefix,), field="llms.link_prefixes"
        ),
    )


def _build_one_page_config(
    payload: dict[str, typ.Any], version: str
) -> OnePageConfig:
    """Build the single-page settings, including each language entry."""
    title = _optional_str(payload.get("title")) or _constants.ONE_PAGE_TITLE
    layout = (
        _optional_str(payload.get("layout")) or _constants.ONE_PAGE_LAYOUT_TEMPLATE
    )
    heading = (
        _optional_str(payload.get("supplementary_heading"))
        or _constants.SUPPLEMENTARY_HEADING
    )
    languages_raw = _mapping(payload.get("languages"), field="one_page.languages")
    if not languages_raw:
        languages_raw = {
            code: {"intro": intro} for code, intro in _constants.INTRO_MESSAGES.items()
        }

    languages: dict[str, LanguageConfig] = {}
    for code, entry in languages_raw.items():
        entry_map = _mapping(entry, field=f"one_page.languages.{code}")
        intro = _optional_str(entry_map.get("intro")) or _constants.INTRO_MESSAGES.get(
            code
        )
        if not intro:
            msg = f"Language '{code}' is missing an 'intro' message."
            raise ManualConfigError(msg)
        page_order = entry_map.get("page_order")
        languages[code] = LanguageConfig(
            code=code,
            intro=intro,
            title=_optional_str(entry_map.get("title")) or title,
            layout=(_optional_str(entry_map.get("layout")) or layout).format(
                language=code
            ),
            permalink=_constants.PERMALINK_TEMPLATE.format(
                version=version, language=code
            ),
            supplementary_heading=(
                _optional_str(entry_map.get("supplementary_heading")) or heading
            ),
            page_order=(
                None
                if page_order is None
                else _string_list(
                    page_order, (), field=f"one_page.languages.{code}.page_order"
                )
            ),
        )

    supplementary_dir = payload.get("supplementary_dir", _constants.SUPPLEMENTARY_DIR)
    return OnePageConfig(
        output_name=_optional_str(payload.get("output_name"))
        or _constants.ONE_PAGE_OUTPUT,
        navigation=_optional_str(payload.get("navigation"))
        or _constants.NAVIGATION_TEMPLATE,
        skip_pages=_string_list(
            payload.get("skip_pages"), _constants.SKIP_PAGES, field="one_page.skip_pages"
        ),
        filename_case=_parse_filename_case(payload.get("filename_case")),
        supplementary_dir=_optional_str(supplementary_dir),
        category=_optional_str(payload.get("category")) or _constants.ONE_PAGE_CATEGORY,
        languages=languages,
    )


__all__ = ["load_manual_config"]
