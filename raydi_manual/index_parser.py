r"""Parse the categorized ``llms.txt`` index into link sections.

The index is prose interleaved with ``## <Section>`` headings. Under the
headings named in an allow-list, bullet lines of the form
``- [Title](path): description`` reference manual pages that get inlined by
:mod:`raydi_manual.llms_full`. Everything else is kept as header text.

Example
-------
>>> from raydi_manual.index_parser import parse_index
>>> doc = parse_index(
...     "# Ray.Di\n\n## Docs\n\n- [Scopes](/manuals/1.0/en/scopes.md): lifetimes\n",
...     sections=["Docs"],
... )
>>> [entry.anchor for entry in doc.links]
['scopes']
>>> doc.header_lines
['# Ray.Di', '']
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from .links import anchor_slug

if typ.TYPE_CHECKING:
    import collections.abc as cabc

SECTION_HEADING_PATTERN = re.compile(r"^## (.+)$")
LINK_ITEM_PATTERN = re.compile(r"^- \[([^\]]+)\]\(([^)]+)\)")


@dc.dataclass(slots=True, frozen=True)
class LinkEntry:
    """One bullet link captured from a linkable section.

    Attributes
    ----------
    title : str
        Link text.
    url : str
        Link target; may carry a ``?query`` or ``#fragment``.
    line : str
        The source line, used to recover the trailing description.
    section : str
        Name of the section the link was found under.
    """

    title: str
    url: str
    line: str
    section: str

    @property
    def anchor(self) -> str:
        """Return the anchor of the inlined copy of the linked page."""
        return anchor_slug(self.url)

    @property
    def description(self) -> str:
        """Return the text after the first ``:`` following the link."""
        match = LINK_ITEM_PATTERN.match(self.line)
        rest = self.line[match.end() :] if match else self.line
        _before, sep, after = rest.partition(":")
        return after.strip() if sep else ""

    def toc_line(self) -> str:
        """Render the table-of-contents bullet pointing at the local anchor."""
        entry = f"- [{self.title}](#{self.anchor})"
        if self.description:
            entry = f"{entry}: {self.description}"
        return entry


@dc.dataclass(slots=True)
class IndexSection:
    """A linkable section and the links captured beneath it."""

    name: str
    toc_only: bool = False
    links: list[LinkEntry] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class IndexDocument:
    """The parsed index: header text plus linkable sections in encounter order."""

    lines: list[str]
    header_lines: list[str]
    sections: dict[str, IndexSection]

    @property
    def links(self) -> list[LinkEntry]:
        """Return every captured link, grouped by section in encounter order."""
        return [entry for section in self.sections.values() for entry in section.links]

    @property
    def expandable_links(self) -> list[LinkEntry]:
        """Return the links whose pages should be inlined."""
        return [
            entry
            for section in self.sections.values()
            if not section.toc_only
            for entry in section.links
        ]


def parse_index(
    text: str,
    *,
    sections: cabc.Iterable[str],
    toc_only_sections: cabc.Iterable[str] = (),
) -> IndexDocument:
    """Split ``text`` into header lines and linkable sections.

    Parameters
    ----------
    text : str
        Content of the index document.
    sections : Iterable[str]
        Heading names whose bullet links are inlined.
    toc_only_sections : Iterable[str], optional
        Heading names whose links are listed in the table of contents but
        never inlined.

    Returns
    -------
    IndexDocument
        Header lines in source order (linkable headings and the lines under
        them are excluded) and each linkable section once, in the order it
        was first seen. A repeated heading appends to the earlier section.
    """
    expandable = set(sections)
    toc_only = set(toc_only_sections)
    lines = text.split("\n")
    header_lines: list[str] = []
    parsed: dict[str, IndexSection] = {}
    current: IndexSection | None = None

    for line in lines:
        heading = SECTION_HEADING_PATTERN.match(line.rstrip())
        if heading:
            name = heading.group(1).strip()
            if name in expandable or name in toc_only:
                current = parsed.setdefault(
                    name,
                    IndexSection(name=name, toc_only=name not in expandable),
                )
            else:
                current = None
                header_lines.append(line)
            continue
        if current is None:
            header_lines.append(line)
            continue
        link = LINK_ITEM_PATTERN.match(line)
        if link:
            title, url = link.groups()
            current.links.append(
                LinkEntry(title=title, url=url, line=line, section=current.name)
            )

    return IndexDocument(lines=lines, header_lines=header_lines, sections=parsed)


__all__ = [
    "IndexDocument",
    "IndexSection",
    "LinkEntry",
    "parse_index",
]
