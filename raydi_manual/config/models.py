"""Typed dataclasses describing the manual build configuration."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path


class ManualConfigError(ValueError):
    """Raised when the manual configuration is invalid or incomplete."""


class FilenameCase(enum.Enum):
    """On-disk naming convention of the per-topic markdown files."""

    CAMEL = "camel"
    KEBAB = "kebab"


@dc.dataclass(slots=True)
class LlmsConfig:
    """Settings for expanding ``llms.txt`` into ``llms-full.txt``."""

    index: Path
    output: Path
    sections: list[str]
    toc_only_sections: list[str]
    link_prefixes: list[str]


@dc.dataclass(slots=True)
class LanguageConfig:
    """Per-language settings for the single-page manual."""

    code: str
    intro: str
    title: str
    layout: str
    permalink: str
    supplementary_heading: str
    page_order: list[str] | None = None


@dc.dataclass(slots=True)
class OnePageConfig:
    """Settings shared by every single-page manual."""

    output_name: str
    navigation: str
    skip_pages: list[str]
    filename_case: FilenameCase
    supplementary_dir: str | None
    category: str
    languages: dict[str, LanguageConfig]

    def get_language(self, code: str) -> LanguageConfig:
        """Return the configuration for ``code``."""
        try:
            return self.languages[code]
        except KeyError as exc:
            available = ", ".join(self.languages)
            msg = f"Unknown language '{code}'. Known languages: {available}"
            raise ManualConfigError(msg) from exc


@dc.dataclass(slots=True)
class ManualConfig:
    """Fully resolved configuration rooted at the documentation project."""

    root: Path
    version: str
    manuals_dir: Path
    site_dir: Path
    llms: LlmsConfig
    one_page: OnePageConfig

    def resolve(self, path: Path) -> Path:
        """Return ``path`` anchored at the project root."""
        return path if path.is_absolute() else self.root / path

    @property
    def index_path(self) -> Path:
        """Location of the ``llms.txt`` index."""
        return self.resolve(self.llms.index)

    @property
    def llms_output_path(self) -> Path:
        """Location of the expanded ``llms-full.txt`` document."""
        return self.resolve(self.llms.output)

    def source_dir(self, language: str) -> Path:
        """Return the per-language manual directory."""
        return self.resolve(self.manuals_dir) / self.version / language

    def navigation_path(self, language: str) -> Path:
        """Return the navigation (contents) file for ``language``."""
        relative = self.one_page.navigation.format(
            version=self.version, language=language
        )
        return self.resolve(Path(relative))

    def one_page_output(self, language: str) -> Path:
        """Return the single-page manual path for ``language``."""
        return self.source_dir(language) / self.one_page.output_name


__all__ = [
    "FilenameCase",
    "LanguageConfig",
    "LlmsConfig",
    "ManualConfig",
    "ManualConfigError",
    "OnePageConfig",
]
