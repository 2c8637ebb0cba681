r"""Split Jekyll front-matter from markdown bodies.

Every transform in this package goes through :func:`split_frontmatter`, so the
rules for recognizing a front-matter block live in exactly one place. A block
is a ``---`` fence, any number of lines, and a closing ``---`` fence. The fence
must open the file; a :class:`FrontMatterPolicy` decides which leading noise is
tolerated before it.

Example
-------
>>> from raydi_manual.frontmatter import split_frontmatter
>>> result = split_frontmatter("---\ntitle: Scopes\n---\n# Scopes\n")
>>> result.frontmatter
'title: Scopes'
>>> result.body
'# Scopes\n'
"""

from __future__ import annotations

import dataclasses as dc
import enum
import re

_BLOCK = r"---[ \t]*\n(?P<meta>.*?\n)??---[ \t]*(?:\n|\Z)"


class FrontMatterPolicy(enum.Enum):
    """Which leading text may precede the opening fence."""

    STRICT = "strict"
    PREAMBLE = "preamble"
    DIGIT_PREFIX = "digit_prefix"


_PATTERNS: dict[FrontMatterPolicy, re.Pattern[str]] = {
    FrontMatterPolicy.STRICT: re.compile(r"\A(?P<preamble>)" + _BLOCK, re.DOTALL),
    FrontMatterPolicy.PREAMBLE: re.compile(
        r"\A(?P<preamble>(?:\s|<!--(?:(?!-->).)*-->)*)(?<![^\n])" + _BLOCK,
        re.DOTALL,
    ),
    FrontMatterPolicy.DIGIT_PREFIX: re.compile(
        r"\A(?P<preamble>\d*)" + _BLOCK, re.DOTALL
    ),
}


@dc.dataclass(slots=True, frozen=True)
class FrontMatterSplit:
    """Result of separating a front-matter block from the body.

    Attributes
    ----------
    frontmatter : str or None
        Text between the fences without its trailing newline; ``None`` when
        the document has no front-matter block.
    body : str
        Everything after the closing fence, or the whole text when no block
        was found.
    preamble : str
        Leading text the policy tolerated before the opening fence.
    """

    frontmatter: str | None
    body: str
    preamble: str = ""

    @property
    def has_frontmatter(self) -> bool:
        """Return ``True`` when a front-matter block was removed."""
        return self.frontmatter is not None


def split_frontmatter(
    text: str, policy: FrontMatterPolicy = FrontMatterPolicy.STRICT
) -> FrontMatterSplit:
    """Separate a leading front-matter block from ``text``.

    Parameters
    ----------
    text : str
        Raw markdown content.
    policy : FrontMatterPolicy, optional
        Leniency applied before the opening fence. ``STRICT`` (default)
        requires the fence on the first line.

    Returns
    -------
    FrontMatterSplit
        The block (if any), the remaining body, and any tolerated preamble.
        A ``---`` line further down the document, such as a horizontal rule,
        is never treated as front-matter.
    """
    match = _PATTERNS[policy].match(text)
    if match is None:
        return FrontMatterSplit(frontmatter=None, body=text)
    meta = match.group("meta") or ""
    return FrontMatterSplit(
        frontmatter=meta.removesuffix("\n"),
        body=text[match.end() :],
        preamble=match.group("preamble"),
    )


def strip_frontmatter(
    text: str, policy: FrontMatterPolicy = FrontMatterPolicy.STRICT
) -> str:
    """Return ``text`` with its leading front-matter block removed."""
    return split_frontmatter(text, policy).body


__all__ = [
    "FrontMatterPolicy",
    "FrontMatterSplit",
    "split_frontmatter",
    "strip_frontmatter",
]
