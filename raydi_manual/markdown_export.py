"""Publish the raw manual markdown next to the rendered site.

The ``llms.txt`` convention expects every linked ``.md`` page to be
downloadable from the deployed site. After the Jekyll build, each file under
``manuals/`` is copied to the same relative path under ``_site/manuals/``
with its front-matter removed.
"""

from __future__ import annotations

import logging
import typing as typ

from .frontmatter import FrontMatterPolicy, strip_frontmatter
from .models import ManualSourceError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def export_markdown(source_dir: Path, destination_dir: Path) -> list[Path]:
    """Copy every markdown file below ``source_dir`` without front-matter.

    Parameters
    ----------
    source_dir : Path
        Root of the manual sources (``manuals/``).
    destination_dir : Path
        Target root inside the built site (``_site/manuals/``).

    Returns
    -------
    list[Path]
        Written files, sorted by their path relative to ``source_dir``.

    Raises
    ------
    ManualSourceError
        If ``source_dir`` does not exist.
    """
    if not source_dir.is_dir():
        msg = f"Markdown source directory does not exist: {source_dir}"
        raise ManualSourceError(msg)

    logger.info("Copying markdown files for llms.txt compliance...")
    written: list[Path] = []
    for path in sorted(source_dir.rglob("*.md")):
        if not path.is_file():
            continue
        relative = path.relative_to(source_dir)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping %s: %s", relative, exc)
            continue
        target = destination_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            strip_frontmatter(text, FrontMatterPolicy.STRICT), encoding="utf-8"
        )
        written.append(target)
        logger.info("Copied and cleaned: %s", relative.as_posix())

    logger.info("Copied %d markdown file(s) to %s", len(written), destination_dir)
    return written


__all__ = ["export_markdown"]
