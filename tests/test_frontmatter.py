"""Unit tests for front-matter splitting.

These tests pin the contract of ``split_frontmatter``: a block is only
recognized when its opening fence starts the document (after whatever the
chosen policy tolerates), and a ``---`` line further down, such as a markdown
horizontal rule, never counts as front-matter.

Usage
-----
Run ``pytest tests/test_frontmatter.py -v``.
"""

from __future__ import annotations

import pytest

from raydi_manual.frontmatter import (
    FrontMatterPolicy,
    split_frontmatter,
    strip_frontmatter,
)


def test_strict_block_is_removed_exactly() -> None:
    """A block at offset zero is removed and the body is left untouched."""
    result = split_frontmatter("---\nlayout: docs-en\ntitle: Scopes\n---\n# Scopes\n")
    assert result.frontmatter == "layout: docs-en\ntitle: Scopes", (
        f"unexpected front-matter {result.frontmatter!r}"
    )
    assert result.body == "# Scopes\n", f"unexpected body {result.body!r}"
    assert result.has_frontmatter


def test_horizontal_rule_in_body_is_preserved() -> None:
    """Only the first block is removed; later fences stay in the body."""
    text = "---\ntitle: A\n---\nText\n\n---\n\nMore\n---\n"
    assert strip_frontmatter(text) == "Text\n\n---\n\nMore\n---\n"


def test_fence_after_content_is_not_frontmatter() -> None:
    """A fence that does not open the document is ignored."""
    text = "Intro\n---\ntitle: not meta\n---\nBody\n"
    result = split_frontmatter(text)
    assert result.frontmatter is None, "fence after content must not be front-matter"
    assert result.body == text


def test_unclosed_block_is_not_frontmatter() -> None:
    """Without a closing fence the whole text is body."""
    text = "---\ntitle: A\nBody\n"
    assert split_frontmatter(text).frontmatter is None
    assert strip_frontmatter(text) == text


def test_empty_block_is_recognized() -> None:
    """Two consecutive fences form an empty front-matter block."""
    result = split_frontmatter("---\n---\nBody")
    assert result.frontmatter == ""
    assert result.has_frontmatter
    assert result.body == "Body"


def test_preamble_policy_tolerates_comments_and_whitespace() -> None:
    """Leading HTML comments and blank lines are allowed before the fence."""
    text = "<!-- generated -->\n\n---\ntitle: A\n---\nBody"
    result = split_frontmatter(text, FrontMatterPolicy.PREAMBLE)
    assert result.frontmatter == "title: A"
    assert result.body == "Body"
    assert result.preamble == "<!-- generated -->\n\n"


@pytest.mark.parametrize(
    "text",
    ["<!-- generated -->\n---\ntitle: A\n---\nBody", "12---\ntitle: A\n---\nBody"],
)
def test_strict_policy_rejects_leading_noise(text: str) -> None:
    """The strict policy leaves documents with leading noise untouched."""
    assert split_frontmatter(text).frontmatter is None


def test_digit_prefix_policy_reports_stray_digits() -> None:
    """Digits glued to the opening fence are removed and reported."""
    result = split_frontmatter("12---\ntitle: A\n---\nBody", FrontMatterPolicy.DIGIT_PREFIX)
    assert result.frontmatter == "title: A"
    assert result.body == "Body"
    assert result.preamble == "12"


def test_preamble_policy_rejects_prose_before_fence() -> None:
    """Text other than comments and whitespace disables front-matter."""
    text = "Hello\n---\ntitle: A\n---\nBody"
    assert split_frontmatter(text, FrontMatterPolicy.PREAMBLE).frontmatter is None


def test_preamble_comment_does_not_reach_later_comments() -> None:
    """A leading comment ends at its own terminator, not at a later one."""
    text = (
        "<!-- translated -->\n# Scopes\n\nSingletons live forever.\n"
        "<!-- end intro -->\n---\n\nMore text\n\n---\n\nTail\n"
    )
    result = split_frontmatter(text, FrontMatterPolicy.PREAMBLE)
    assert result.frontmatter is None, "a later horizontal rule is not front-matter"
    assert result.body == text
    assert result.preamble == ""


def test_preamble_policy_keeps_rules_after_real_frontmatter() -> None:
    """Comments and rules in the body survive once the block is removed."""
    text = (
        "<!-- synced -->\n---\ntitle: Scopes\n---\n# Scopes\n"
        "<!-- note -->\n---\n\nTail\n"
    )
    result = split_frontmatter(text, FrontMatterPolicy.PREAMBLE)
    assert result.frontmatter == "title: Scopes"
    assert result.preamble == "<!-- synced -->\n"
    assert result.body == "# Scopes\n<!-- note -->\n---\n\nTail\n"
