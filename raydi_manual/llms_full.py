"""Expand ``llms.txt`` into a self-contained ``llms-full.txt``.

The index lists manual pages under a few well-known headings. This module
keeps the index prose, re-emits those headings as a table of contents whose
links point at local anchors, and then inlines every linked page with its
front-matter removed and its ``.md`` cross-references rewritten into anchors.
The result is one document an automated reader can ingest in a single fetch.

Typical usage goes through the configuration loader:

>>> from pathlib import Path
>>> from raydi_manual.config import load_manual_config
>>> from raydi_manual.llms_full import LlmsFullBuilder
>>> config = load_manual_config(Path("."))  # doctest: +SKIP
>>> LlmsFullBuilder(config).run()  # doctest: +SKIP
PosixPath('llms-full.txt')

Missing or empty pages are skipped with a warning; only a missing index is
fatal (:class:`~raydi_manual.models.ManualSourceError`).
"""

from __future__ import annotations

import logging
import typing as typ
from urllib.parse import urlsplit

from . import _constants
from .documents import read_markdown
from .frontmatter import FrontMatterPolicy
from .index_parser import IndexDocument, LinkEntry, parse_index
from .links import rewrite_markdown_links
from .models import CombinedOutput, ManualSourceError, SkippedEntry

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import ManualConfig

logger = logging.getLogger(__name__)


def resolve_link_path(
    url: str, base_dir: Path, prefixes: cabc.Iterable[str]
) -> Path | None:
    """Map a link target onto a file below ``base_dir``.

    Only targets whose path starts with one of ``prefixes`` resolve; query
    strings and fragments are dropped. Returns ``None`` for anything else,
    including targets whose ``..`` segments lead outside ``base_dir``.

    >>> from pathlib import Path
    >>> resolve_link_path("/manuals/1.0/en/scopes.md#x", Path("/site"), ["/manuals/1.0/en/"])
    PosixPath('/site/manuals/1.0/en/scopes.md')
    >>> resolve_link_path("https://example.com/a.md", Path("/site"), ["/manuals/1.0/en/"]) is None
    True
    """
    path = urlsplit(url).path
    if not any(path.startswith(prefix) for prefix in prefixes):
        return None
    candidate = base_dir / path.lstrip("/")
    if not candidate.resolve().is_relative_to(base_dir.resolve()):
        return None
    return candidate


def render_toc(document: IndexDocument) -> str:
    """Render the header lines followed by one anchor-linked list per section."""
    parts = ["\n".join(document.header_lines).rstrip("\n") + "\n"]
    for section in document.sections.values():
        parts.append(f"\n## {section.name}\n\n")
        parts.extend(f"{entry.toc_line()}\n" for entry in section.links)
    return "".join(parts)


def expand(
    index_path: Path,
    base_dir: Path,
    *,
    output_path: Path | None = None,
    sections: cabc.Iterable[str] = _constants.LINKABLE_SECTIONS,
    toc_only_sections: cabc.Iterable[str] = _constants.TOC_ONLY_SECTIONS,
    link_prefixes: cabc.Iterable[str] = (
        _constants.LINK_PREFIX_TEMPLATE.format(version=_constants.DEFAULT_VERSION),
    ),
) -> CombinedOutput:
    """Build the expanded document for ``index_path`` without writing it.

    Parameters
    ----------
    index_path : Path
        The ``llms.txt`` index.
    base_dir : Path
        Root that link targets are resolved against.
    output_path : Path or None, optional
        Destination recorded on the result; defaults to ``llms-full.txt``
        under ``base_dir``.
    sections : Iterable[str], optional
        Headings whose linked pages are inlined.
    toc_only_sections : Iterable[str], optional
        Headings listed in the table of contents without inlining.
    link_prefixes : Iterable[str], optional
        Target prefixes that resolve to local files.

    Returns
    -------
    CombinedOutput
        Header (index text and table of contents), a separator, and the
        inlined page bodies separated by blank lines.

    Raises
    ------
    ManualSourceError
        If the index file does not exist or cannot be read.
    """
    if not index_path.is_file():
        msg = f"llms.txt not found at: {index_path}"
        raise ManualSourceError(msg)
    logger.info("Reading %s...", index_path.name)
    try:
        text = index_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read {index_path}: {exc}"
        raise ManualSourceError(msg) from exc

    document = parse_index(
        text, sections=sections, toc_only_sections=toc_only_sections
    )
    prefixes = list(link_prefixes)
    result = CombinedOutput(
        path=output_path or base_dir / _constants.LLMS_OUTPUT,
        header=render_toc(document) + f"\n{_constants.HORIZONTAL_RULE}\n",
    )
    bodies: list[str] = []
    for entry in document.expandable_links:
        body = _load_entry(entry, base_dir, prefixes, result)
        if body is not None:
            bodies.append(body)
            result.included.append(entry.title)
    result.body = "".join(f"\n{body}\n" for body in bodies)
    return result


def _load_entry(
    entry: LinkEntry,
    base_dir: Path,
    prefixes: list[str],
    result: CombinedOutput,
) -> str | None:
    """Return the rewritten body for ``entry`` or record why it was skipped."""
    path = resolve_link_path(entry.url, base_dir, prefixes)
    if path is None:
        return _skip(result, entry.title, f"unresolvable link target {entry.url}")
    if not path.is_file():
        return _skip(result, entry.title, f"could not find file at {path}")
    try:
        document = read_markdown(path, FrontMatterPolicy.PREAMBLE)
    except (OSError, UnicodeDecodeError) as exc:
        return _skip(result, entry.title, f"could not read {path}: {exc}")
    if document.is_empty:
        return _skip(result, entry.title, f"no content in {path}")
    logger.info("Including: %s from %s", entry.title, path)
    return rewrite_markdown_links(document.content)


def _skip(result: CombinedOutput, name: str, reason: str) -> None:
    logger.warning("Skipping %s: %s", name, reason)
    result.skipped.append(SkippedEntry(name=name, reason=reason))


class LlmsFullBuilder:
    """Write ``llms-full.txt`` for a configured documentation project."""

    def __init__(self, config: ManualConfig) -> None:
        self.config = config

    def build(self) -> CombinedOutput:
        """Return the expanded document without touching the output file."""
        llms = self.config.llms
        return expand(
            self.config.index_path,
            self.config.root,
            output_path=self.config.llms_output_path,
            sections=llms.sections,
            toc_only_sections=llms.toc_only_sections,
            link_prefixes=llms.link_prefixes,
        )

    def run(self) -> Path:
        """Build and write the expanded document, returning its path."""
        result = self.build()
        path = result.write()
        logger.info(
            "Generated %s successfully (%s characters)",
            path.name,
            f"{len(result.text):,}",
        )
        if result.skipped:
            logger.warning("%d linked page(s) were skipped", len(result.skipped))
        return path


__all__ = ["LlmsFullBuilder", "expand", "render_toc", "resolve_link_path"]
