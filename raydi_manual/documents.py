"""Markdown documents read from the manual tree."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .frontmatter import FrontMatterPolicy, split_frontmatter

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class MarkdownDocument:
    """A markdown file split into its front-matter block and body.

    Attributes
    ----------
    path : Path
        Location the document was read from.
    raw : str
        Full file content.
    frontmatter : str or None
        Text between the front-matter fences, or ``None`` when absent.
    body : str
        Content after the front-matter block.
    preamble : str
        Leading text tolerated before the opening fence (comments, stray
        digits); empty for well-formed files.
    """

    path: Path
    raw: str
    frontmatter: str | None
    body: str
    preamble: str = ""

    @property
    def content(self) -> str:
        """Return the body with surrounding whitespace trimmed."""
        return self.body.strip()

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when nothing but whitespace remains in the body."""
        return not self.content

    @property
    def metadata(self) -> dict[str, typ.Any]:
        """Parse the front-matter block into a mapping.

        Returns an empty mapping when the block is absent, is not a mapping,
        or is not valid YAML. Invalid YAML is logged as a warning.
        """
        if not self.frontmatter:
            return {}
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        try:
            loaded = loader.load(self.frontmatter)
        except YAMLError as exc:
            logger.warning("Ignoring unreadable front-matter in %s: %s", self.path, exc)
            return {}
        if not isinstance(loaded, dict):
            return {}
        return dict(loaded)

    @property
    def title(self) -> str | None:
        """Return the front-matter ``title`` value when present."""
        value = self.metadata.get("title")
        if value is None:
            return None
        text = str(value).strip()
        return text or None


def parse_markdown(
    path: Path, text: str, policy: FrontMatterPolicy = FrontMatterPolicy.STRICT
) -> MarkdownDocument:
    """Build a :class:`MarkdownDocument` from already loaded ``text``."""
    split = split_frontmatter(text, policy)
    return MarkdownDocument(
        path=path,
        raw=text,
        frontmatter=split.frontmatter,
        body=split.body,
        preamble=split.preamble,
    )


def read_markdown(
    path: Path, policy: FrontMatterPolicy = FrontMatterPolicy.STRICT
) -> MarkdownDocument:
    """Read ``path`` as UTF-8 and split off its front-matter.

    Raises
    ------
    OSError
        If the file cannot be opened.
    UnicodeDecodeError
        If the file is not valid UTF-8.
    """
    return parse_markdown(path, path.read_text(encoding="utf-8"), policy)


__all__ = ["MarkdownDocument", "parse_markdown", "read_markdown"]
