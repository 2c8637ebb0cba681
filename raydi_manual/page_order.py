r"""Decide the order in which manual pages are merged.

Three strategies are available. An explicit list from the configuration wins
when present. Otherwise the order is derived from the site navigation
(``contents.html``): every ``href`` under ``/manuals/<version>/<language>/``
ending in ``.html`` is taken in document order and mapped to a markdown
filename. When that derivation yields nothing, :func:`needs_fallback` is true
and the pages are merged alphabetically instead.

Example
-------
>>> from raydi_manual.page_order import slug_to_filename
>>> from raydi_manual.config import FilenameCase
>>> slug_to_filename("linked-bindings", FilenameCase.CAMEL)
'LinkedBindings.md'
>>> slug_to_filename("Linked_Bindings", FilenameCase.KEBAB)
'linked-bindings.md'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import logging
import re
import typing as typ

from bs4 import BeautifulSoup

from .config import FilenameCase

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

SLUG_SEPARATOR_PATTERN = re.compile(r"[-_]")
MARKDOWN_GLOB = "*.md"


class OrderStrategy(enum.Enum):
    """Where a :class:`PageOrder` came from."""

    EXPLICIT = "explicit"
    NAVIGATION = "navigation"
    ALPHABETICAL = "alphabetical"


@dc.dataclass(slots=True, frozen=True)
class PageOrder:
    """Ordered markdown filenames for one language.

    Attributes
    ----------
    filenames : tuple[str, ...]
        Filenames relative to the language's source directory.
    strategy : OrderStrategy
        Strategy that produced the list.
    """

    filenames: tuple[str, ...]
    strategy: OrderStrategy

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self.filenames)

    def __len__(self) -> int:
        return len(self.filenames)


def slug_to_filename(slug: str, case: FilenameCase) -> str:
    """Convert a URL slug into the on-disk markdown filename."""
    parts = [part for part in SLUG_SEPARATOR_PATTERN.split(slug) if part]
    if case is FilenameCase.KEBAB:
        stem = "-".join(part.lower() for part in parts)
    else:
        stem = "".join(part.capitalize() for part in parts)
    return f"{stem}.md"


def page_key(name: str) -> str:
    """Return a casing-insensitive key for a slug or filename.

    >>> page_key("AiAssistant.md") == page_key("ai-assistant")
    True
    """
    stem = name.removesuffix(".md").removesuffix(".html")
    return SLUG_SEPARATOR_PATTERN.sub("", stem).lower()


def extract_navigation_slugs(html: str, *, version: str, language: str) -> list[str]:
    """Return page slugs linked from ``html`` in document order.

    Only anchors whose ``href`` is ``/manuals/<version>/<language>/<slug>.html``
    count. Duplicates keep their first position and nested paths are ignored.
    """
    pattern = re.compile(
        rf"^/manuals/{re.escape(version)}/{re.escape(language)}/([^\"]+)\.html$"
    )
    soup = BeautifulSoup(html, "html.parser")
    slugs: list[str] = []
    for anchor in soup.find_all("a", href=True):
        match = pattern.match(str(anchor["href"]).strip())
        if not match:
            continue
        slug = match.group(1)
        if "/" in slug:
            logger.debug("Ignoring nested navigation entry %s", slug)
            continue
        if slug not in slugs:
            slugs.append(slug)
    return slugs


def order_from_navigation(
    navigation_path: Path,
    *,
    version: str,
    language: str,
    skip_pages: cabc.Iterable[str],
    filename_case: FilenameCase,
) -> list[str]:
    """Derive markdown filenames from the navigation file.

    Returns an empty list when the file is missing, unreadable, or links to no
    pages, so the caller can fall back to another strategy.
    """
    if not navigation_path.is_file():
        logger.warning("Contents file not found: %s", navigation_path)
        return []
    try:
        html = navigation_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read contents file %s: %s", navigation_path, exc)
        return []

    slugs = extract_navigation_slugs(html, version=version, language=language)
    if not slugs:
        logger.warning(
            "No permalinks found in %s. Navigation structure may have changed.",
            navigation_path,
        )
        return []
    logger.info("Found %d pages in navigation order", len(slugs))

    skipped = {page_key(page) for page in skip_pages}
    return [
        slug_to_filename(slug, filename_case)
        for slug in slugs
        if page_key(slug) not in skipped
    ]


def alphabetical_order(
    source_dir: Path, *, output_name: str, skip_pages: cabc.Iterable[str]
) -> list[str]:
    """List the markdown files in ``source_dir`` sorted by name.

    The single-page output itself and the skipped pages are excluded.
    """
    skipped = {page_key(page) for page in skip_pages}
    return sorted(
        path.name
        for path in source_dir.glob(MARKDOWN_GLOB)
        if path.is_file()
        and path.name != output_name
        and page_key(path.name) not in skipped
    )


def needs_fallback(filenames: cabc.Sequence[str]) -> bool:
    """Return ``True`` when a derived order is unusable and must be replaced."""
    return not filenames


def resolve_page_order(
    source_dir: Path,
    *,
    language: str,
    version: str,
    navigation_path: Path,
    output_name: str,
    skip_pages: cabc.Sequence[str],
    filename_case: FilenameCase,
    explicit: cabc.Sequence[str] | None = None,
) -> PageOrder:
    """Choose the page order for one language.

    An explicit list is used verbatim. Otherwise the navigation order is
    derived and, when :func:`needs_fallback` says it is empty, replaced by the
    alphabetical listing of ``source_dir`` with a logged warning.
    """
    if explicit is not None:
        return PageOrder(tuple(explicit), OrderStrategy.EXPLICIT)

    derived = order_from_navigation(
        navigation_path,
        version=version,
        language=language,
        skip_pages=skip_pages,
        filename_case=filename_case,
    )
    if needs_fallback(derived):
        logger.warning(
            "Could not extract order from %s, using alphabetical order",
            navigation_path.name,
        )
        fallback = alphabetical_order(
            source_dir, output_name=output_name, skip_pages=skip_pages
        )
        return PageOrder(tuple(fallback), OrderStrategy.ALPHABETICAL)
    return PageOrder(tuple(derived), OrderStrategy.NAVIGATION)


__all__ = [
    "OrderStrategy",
    "PageOrder",
    "alphabetical_order",
    "extract_navigation_slugs",
    "needs_fallback",
    "order_from_navigation",
    "page_key",
    "resolve_page_order",
    "slug_to_filename",
]
