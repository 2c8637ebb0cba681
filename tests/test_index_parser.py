"""Unit tests for parsing the categorized ``llms.txt`` index."""

from __future__ import annotations

from textwrap import dedent

from raydi_manual.index_parser import IndexDocument, parse_index

INDEX = dedent(
    """\
    # Ray.Di

    > A dependency injection framework for PHP.

    ## Docs

    - [Getting Started](/manuals/1.0/en/GettingStarted.md): First steps
    - [Scopes](/manuals/1.0/en/Scopes.md)
    Loose prose inside a linkable section.

    ## Community

    - [Forum](https://example.com/forum): Ask questions

    ## Bindings

    - [Linked Bindings](/manuals/1.0/en/LinkedBindings.md): Map a type: to an implementation

    ## Docs

    - [AOP](/manuals/1.0/en/AOP.md)

    ## Optional

    - [Tutorial](/manuals/1.0/en/Tutorial1.md): Build an app
    """
)


def _parse() -> IndexDocument:
    return parse_index(
        INDEX, sections=["Docs", "Bindings"], toc_only_sections=["Optional"]
    )


def test_sections_appear_once_in_encounter_order() -> None:
    """A repeated heading extends the section first seen."""
    document = _parse()
    assert list(document.sections) == ["Docs", "Bindings", "Optional"]
    titles = [entry.title for entry in document.sections["Docs"].links]
    assert titles == ["Getting Started", "Scopes", "AOP"], (
        f"unexpected Docs links {titles!r}"
    )


def test_other_headings_and_prose_stay_in_header() -> None:
    """Non-linkable headings and their lines are copied verbatim."""
    header = "\n".join(_parse().header_lines)
    assert header.startswith("# Ray.Di\n\n> A dependency injection framework for PHP.")
    assert "## Community" in header
    assert "- [Forum](https://example.com/forum): Ask questions" in header
    assert "## Docs" not in header, "linkable headings must not be copied"
    assert "Loose prose" not in header, "lines inside linkable sections are dropped"


def test_toc_only_sections_are_not_expandable() -> None:
    """Links under TOC-only headings are listed but not inlined."""
    document = _parse()
    assert document.sections["Optional"].toc_only
    expandable = [entry.title for entry in document.expandable_links]
    assert "Tutorial" not in expandable
    assert [entry.title for entry in document.links][-1] == "Tutorial"


def test_toc_line_keeps_description_after_first_colon() -> None:
    """Descriptions are recovered from the source line after the link."""
    bindings = _parse().sections["Bindings"].links[0]
    assert bindings.description == "Map a type: to an implementation"
    assert bindings.toc_line() == (
        "- [Linked Bindings](#linkedbindings): Map a type: to an implementation"
    )


def test_toc_line_without_description() -> None:
    """Entries without trailing text render just the anchor link."""
    scopes = _parse().sections["Docs"].links[1]
    assert scopes.description == ""
    assert scopes.toc_line() == "- [Scopes](#scopes)"
