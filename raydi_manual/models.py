"""Shared dataclasses and errors used by the manual build pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class ManualSourceError(FileNotFoundError):
    """Raised when a required input file or directory is missing."""


@dc.dataclass(slots=True, frozen=True)
class SkippedEntry:
    """An input left out of a combined document.

    Attributes
    ----------
    name : str
        Title, filename, or link target identifying the input.
    reason : str
        Human-readable explanation, as logged.
    """

    name: str
    reason: str


@dc.dataclass(slots=True)
class CombinedOutput:
    """A combined document assembled from several manual pages.

    Attributes
    ----------
    path : Path
        Where the document is written.
    header : str
        Synthesized header (index text and table of contents, or the
        single-page front-matter block and heading).
    intro : str
        Literal intro message; empty when the document has none.
    body : str
        Concatenated page bodies with their separators.
    included : list[str]
        Inputs that made it into ``body``, in order.
    skipped : list[SkippedEntry]
        Inputs that were left out, in the order they were encountered.
    """

    path: Path
    header: str
    intro: str = ""
    body: str = ""
    included: list[str] = dc.field(default_factory=list)
    skipped: list[SkippedEntry] = dc.field(default_factory=list)

    @property
    def text(self) -> str:
        """Return the full document text."""
        return f"{self.header}{self.intro}{self.body}"

    def write(self) -> Path:
        """Write the document as UTF-8, replacing any previous file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.text, encoding="utf-8")
        return self.path


__all__ = ["CombinedOutput", "ManualSourceError", "SkippedEntry"]
