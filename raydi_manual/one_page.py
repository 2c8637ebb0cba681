"""Merge the per-topic manual pages into one single-page manual per language.

Each language directory (``manuals/<version>/<language>/``) holds one
markdown file per topic. :class:`OnePageBuilder` concatenates them in the
order chosen by :mod:`raydi_manual.page_order`, strips their front-matter,
separates them with horizontal rules, and prepends a synthesized Jekyll
header rendered from ``templates/one_page_header.md.jinja``. Pages from the
optional supplementary folder (``bp/``) follow under their own heading.

Example
-------
>>> from pathlib import Path
>>> from raydi_manual.config import load_manual_config
>>> from raydi_manual.one_page import OnePageBuilder
>>> config = load_manual_config(Path("."))  # doctest: +SKIP
>>> OnePageBuilder(config).run(["en"])  # doctest: +SKIP
[PosixPath('manuals/1.0/en/1page.md')]

A missing language directory is fatal for that language; missing, unreadable,
or empty pages are logged and skipped.
"""

from __future__ import annotations

import logging
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from . import _constants
from .documents import MarkdownDocument, read_markdown
from .frontmatter import FrontMatterPolicy
from .models import CombinedOutput, ManualSourceError, SkippedEntry
from .page_order import MARKDOWN_GLOB, PageOrder, resolve_page_order

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import LanguageConfig, ManualConfig

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = f"\n{_constants.HORIZONTAL_RULE}\n\n"
LEADING_HEADING_PATTERN = re.compile(r"\A#{1,6}[ \t]+(.+?)[ \t#]*(?:\n|\Z)")
HEADER_TEMPLATE = "one_page_header.md.jinja"


def find_page(source_dir: Path, filename: str) -> Path | None:
    """Locate ``filename`` in ``source_dir``.

    An exact match wins; otherwise a single case-insensitive match is used so
    that ``Aop.md`` finds ``AOP.md``. Returns ``None`` when nothing (or more
    than one candidate) matches.
    """
    exact = source_dir / filename
    if exact.is_file():
        return exact
    wanted = filename.lower()
    candidates = [
        path
        for path in source_dir.glob(MARKDOWN_GLOB)
        if path.is_file() and path.name.lower() == wanted
    ]
    if len(candidates) == 1:
        return candidates[0]
    return None


def split_leading_heading(text: str) -> tuple[str | None, str]:
    """Separate a leading markdown heading from the rest of ``text``.

    >>> split_leading_heading("# Avoid Cycles\\n\\nBody")
    ('Avoid Cycles', 'Body')
    >>> split_leading_heading("Body only")
    (None, 'Body only')
    """
    stripped = text.lstrip()
    match = LEADING_HEADING_PATTERN.match(stripped)
    if match is None:
        return None, text.strip()
    return match.group(1).strip(), stripped[match.end() :].strip()


def _read_page(
    path: Path, label: str, result: CombinedOutput
) -> MarkdownDocument | None:
    """Read ``path`` for merging, recording a skip when it cannot be used."""
    try:
        document = read_markdown(path, FrontMatterPolicy.DIGIT_PREFIX)
    except (OSError, UnicodeDecodeError) as exc:
        _skip(result, label, f"error processing file: {exc}")
        return None
    if document.preamble:
        logger.warning(
            "Stray %r before the front-matter fence in %s; the source file "
            "should be repaired",
            document.preamble,
            path,
        )
    if document.is_empty:
        _skip(result, label, "no content after front-matter removal")
        return None
    return document


def _skip(result: CombinedOutput, name: str, reason: str) -> None:
    logger.warning("  Skipping %s: %s", name, reason)
    result.skipped.append(SkippedEntry(name=name, reason=reason))


def merge(
    language: str,
    intro_message: str,
    source_dir: Path,
    *,
    page_order: cabc.Iterable[str],
    header: str,
    output_path: Path | None = None,
    supplementary_dir: str | None = _constants.SUPPLEMENTARY_DIR,
    supplementary_heading: str = _constants.SUPPLEMENTARY_HEADING,
) -> CombinedOutput:
    """Concatenate the pages of one language into a single document.

    Parameters
    ----------
    language : str
        Language code, used for logging.
    intro_message : str
        Literal text placed after the header.
    source_dir : Path
        The language's manual directory.
    page_order : Iterable[str]
        Filenames in merge order.
    header : str
        Synthesized front-matter block and top-level heading.
    output_path : Path or None, optional
        Destination recorded on the result; defaults to ``1page.md`` in
        ``source_dir``.
    supplementary_dir : str or None, optional
        Subfolder whose pages are appended after the ordered pages.
    supplementary_heading : str, optional
        Heading placed above the supplementary pages.

    Returns
    -------
    CombinedOutput
        The merged document. Bodies are separated by horizontal rules; none
        precedes the first body and skipped pages leave no trace.

    Raises
    ------
    ManualSourceError
        If ``source_dir`` does not exist.
    """
    if not source_dir.is_dir():
        msg = f"Source folder does not exist: {source_dir}"
        raise ManualSourceError(msg)

    result = CombinedOutput(
        path=output_path or source_dir / _constants.ONE_PAGE_OUTPUT,
        header=header,
        intro=f"{intro_message}\n\n{_constants.HORIZONTAL_RULE}\n\n",
    )
    parts: list[str] = []
    for filename in page_order:
        path = find_page(source_dir, filename)
        if path is None:
            _skip(result, filename, "file not found")
            continue
        document = _read_page(path, filename, result)
        if document is None:
            continue
        if parts:
            parts.append(SECTION_SEPARATOR)
        parts.append(f"{document.content}\n")
        result.included.append(path.name)
        logger.info("  Added: %s", path.name)

    if supplementary_dir:
        extra = _merge_supplementary(
            source_dir / supplementary_dir, supplementary_heading, result
        )
        if extra:
            if parts:
                parts.append(SECTION_SEPARATOR)
            parts.append(extra)

    result.body = "".join(parts)
    logger.info("Total sections for %s: %d", language, len(result.included))
    return result


def _merge_supplementary(
    folder: Path, heading: str, result: CombinedOutput
) -> str:
    """Render the supplementary pages under ``heading``; empty when none apply."""
    if not folder.is_dir():
        return ""
    entries: list[str] = []
    for path in sorted(folder.glob(MARKDOWN_GLOB)):
        label = f"{folder.name}/{path.name}"
        document = _read_page(path, label, result)
        if document is None:
            continue
        title, content = split_leading_heading(document.content)
        title = title or document.title or path.stem
        entry = f"\n### {title}\n"
        if content:
            entry = f"{entry}\n{content}\n"
        entries.append(entry)
        result.included.append(label)
        logger.info("  Added supplementary page: %s", path.name)
    if not entries:
        return ""
    return f"## {heading}\n" + "".join(entries)


class OnePageBuilder:
    """Render single-page manuals for the configured languages."""

    def __init__(
        self, config: ManualConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and its Jinja environment.

        Parameters
        ----------
        config : ManualConfig
            Resolved manual configuration.
        templates_dir : Path, optional
            Directory holding ``one_page_header.md.jinja``; defaults to the
            package templates.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template(HEADER_TEMPLATE)

    def render_header(self, language: LanguageConfig) -> str:
        """Render the front-matter block and top-level heading."""
        return self.template.render(
            layout=language.layout,
            title=language.title,
            category=self.config.one_page.category,
            permalink=language.permalink,
        )

    def page_order(self, language: LanguageConfig) -> PageOrder:
        """Resolve the merge order for ``language``."""
        settings = self.config.one_page
        return resolve_page_order(
            self.config.source_dir(language.code),
            language=language.code,
            version=self.config.version,
            navigation_path=self.config.navigation_path(language.code),
            output_name=settings.output_name,
            skip_pages=settings.skip_pages,
            filename_case=settings.filename_case,
            explicit=language.page_order,
        )

    def build(self, code: str) -> CombinedOutput:
        """Return the merged document for ``code`` without writing it.

        Raises
        ------
        ManualSourceError
            If the language's source directory does not exist.
        """
        language = self.config.one_page.get_language(code)
        source_dir = self.config.source_dir(code)
        logger.info("Processing %s documentation...", code)
        if not source_dir.is_dir():
            msg = f"Source folder does not exist: {source_dir}"
            raise ManualSourceError(msg)
        order = self.page_order(language)
        return merge(
            code,
            language.intro,
            source_dir,
            page_order=order,
            header=self.render_header(language),
            output_path=self.config.one_page_output(code),
            supplementary_dir=self.config.one_page.supplementary_dir,
            supplementary_heading=language.supplementary_heading,
        )

    def run(self, languages: cabc.Iterable[str] | None = None) -> list[Path]:
        """Write the single-page manual for each language in turn.

        A missing source directory stops only that language; the remaining
        languages are still written before the failure is re-raised.

        Returns
        -------
        list[Path]
            Paths written, in language order.

        Raises
        ------
        ManualSourceError
            If any requested language had no source directory.
        """
        codes = list(languages) if languages is not None else list(
            self.config.one_page.languages
        )
        written: list[Path] = []
        failed: list[str] = []
        for code in codes:
            try:
                result = self.build(code)
            except ManualSourceError as exc:
                logger.error("Skipping %s single-page manual: %s", code, exc)
                failed.append(code)
                continue
            written.append(result.write())
            logger.info("Generated: %s", result.path)
        if failed:
            msg = f"Missing manual sources for: {', '.join(failed)}"
            raise ManualSourceError(msg)
        return written


__all__ = [
    "OnePageBuilder",
    "find_page",
    "merge",
    "split_leading_heading",
]
