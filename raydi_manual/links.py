r"""Turn cross-document markdown links into intra-document anchors.

When several manual pages are inlined into one file, a link such as
``[See Scopes](scopes.md#singleton)`` must point at the inlined copy rather
than at a sibling file. The helpers here derive anchors from file names and
rewrite ``.md`` targets while leaving external URLs alone.

Example
-------
>>> from raydi_manual.links import rewrite_markdown_links
>>> rewrite_markdown_links("[See Scopes](scopes.md#singleton)")
'[See Scopes](#scopes-singleton)'
>>> rewrite_markdown_links("[Docs](https://example.com/a.md)")
'[Docs](https://example.com/a.md)'
"""

from __future__ import annotations

import posixpath
import re
from urllib.parse import urlsplit

MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
EXTERNAL_URL_PATTERN = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:)?//")
MARKDOWN_SUFFIX = ".md"


def is_external_url(url: str) -> bool:
    """Return ``True`` for ``scheme://`` and protocol-relative ``//`` URLs."""
    return bool(EXTERNAL_URL_PATTERN.match(url.strip()))


def anchor_slug(target: str) -> str:
    """Return the anchor for the file named by ``target``.

    The basename is taken without extension, hyphens and underscores become
    word breaks, and the words are joined lowercase with hyphens. Query
    strings and fragments are ignored.

    >>> anchor_slug("/manuals/1.0/en/GettingStarted.md")
    'gettingstarted'
    >>> anchor_slug("linked_bindings.md?lang=en")
    'linked-bindings'
    """
    path = urlsplit(target).path
    stem, _ext = posixpath.splitext(posixpath.basename(path))
    words = stem.replace("-", " ").replace("_", " ")
    return words.lower().replace(" ", "-")


def fragment_slug(fragment: str) -> str:
    """Normalize a URL fragment for use as an anchor suffix."""
    return fragment.lower().replace(" ", "-").replace("_", "-")


def rewrite_link_target(url: str) -> str | None:
    """Return the anchor replacing ``url``, or ``None`` to keep it as is.

    Only targets whose path component ends in ``.md`` are rewritten; a
    fragment on the original target is appended to the file anchor.
    """
    if is_external_url(url):
        return None
    parts = urlsplit(url)
    if not parts.path.endswith(MARKDOWN_SUFFIX):
        return None
    anchor = anchor_slug(parts.path)
    if parts.fragment:
        anchor = f"{anchor}-{fragment_slug(parts.fragment)}"
    return f"#{anchor}"


def rewrite_markdown_links(text: str) -> str:
    """Rewrite every ``[text](file.md)`` link in ``text`` into an anchor link."""

    def _replace(match: re.Match[str]) -> str:
        label, url = match.groups()
        rewritten = rewrite_link_target(url)
        if rewritten is None:
            return match.group(0)
        return f"[{label}]({rewritten})"

    return MARKDOWN_LINK_PATTERN.sub(_replace, text)


__all__ = [
    "MARKDOWN_LINK_PATTERN",
    "anchor_slug",
    "fragment_slug",
    "is_external_url",
    "rewrite_link_target",
    "rewrite_markdown_links",
]
