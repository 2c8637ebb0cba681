"""Unit tests for loading ``config/manual.yaml``."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from raydi_manual.config import FilenameCase, ManualConfigError, load_manual_config


def _write_config(root: Path, text: str) -> Path:
    path = root / "config" / "manual.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_defaults_without_config_file(tmp_path: Path) -> None:
    """Built-in defaults describe the Ray.Di manual layout."""
    config = load_manual_config(tmp_path)
    assert config.version == "1.0"
    assert config.index_path == tmp_path / "llms.txt"
    assert config.llms_output_path == tmp_path / "llms-full.txt"
    assert config.llms.toc_only_sections == ["Optional"]
    assert config.llms.link_prefixes == ["/manuals/1.0/en/"]
    assert list(config.one_page.languages) == ["en", "ja"]
    assert config.one_page.filename_case is FilenameCase.CAMEL
    assert config.source_dir("ja") == tmp_path / "manuals" / "1.0" / "ja"
    assert config.navigation_path("en") == (
        tmp_path / "_includes" / "manuals" / "1.0" / "en" / "contents.html"
    )
    english = config.one_page.get_language("en")
    assert english.layout == "docs-en"
    assert english.permalink == "/manuals/1.0/en/1page.html"
    assert english.page_order is None


def test_default_config_file_is_picked_up(tmp_path: Path) -> None:
    """``config/manual.yaml`` under the root overrides the defaults."""
    _write_config(
        tmp_path,
        """
        defaults:
          version: "2.0"
        llms:
          sections: [Getting Started]
        one_page:
          filename_case: kebab
          supplementary_dir: null
          languages:
            en:
              intro: Everything on one page.
              title: Manual
              page_order: [motivation.md, scopes.md]
        """,
    )
    config = load_manual_config(tmp_path)
    assert config.version == "2.0"
    assert config.llms.sections == ["Getting Started"]
    assert config.llms.link_prefixes == ["/manuals/2.0/en/"]
    assert config.one_page.filename_case is FilenameCase.KEBAB
    assert config.one_page.supplementary_dir is None
    english = config.one_page.get_language("en")
    assert english.intro == "Everything on one page."
    assert english.title == "Manual"
    assert english.permalink == "/manuals/2.0/en/1page.html"
    assert english.page_order == ["motivation.md", "scopes.md"]
    assert list(config.one_page.languages) == ["en"]


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    """Asking for a config file that does not exist is an error."""
    with pytest.raises(FileNotFoundError):
        load_manual_config(tmp_path, Path("nope.yaml"))


def test_unknown_filename_case_is_rejected(tmp_path: Path) -> None:
    """Only camel and kebab casing are supported."""
    _write_config(tmp_path, "one_page:\n  filename_case: snake\n")
    with pytest.raises(ManualConfigError, match="filename_case"):
        load_manual_config(tmp_path)


def test_language_without_intro_is_rejected(tmp_path: Path) -> None:
    """Languages other than the built-in ones need an intro message."""
    _write_config(tmp_path, "one_page:\n  languages:\n    fr: {}\n")
    with pytest.raises(ManualConfigError, match="intro"):
        load_manual_config(tmp_path)


def test_unknown_language_lookup_lists_known_languages(tmp_path: Path) -> None:
    """Looking up an unconfigured language names the configured ones."""
    config = load_manual_config(tmp_path)
    with pytest.raises(ManualConfigError, match="en, ja"):
        config.one_page.get_language("fr")


def test_non_mapping_document_is_rejected(tmp_path: Path) -> None:
    """The top level must be a mapping."""
    _write_config(tmp_path, "- just\n- a list\n")
    with pytest.raises(ManualConfigError, match="mapping"):
        load_manual_config(tmp_path)
