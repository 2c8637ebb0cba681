"""Cyclopts CLI entrypoint for building derived Ray.Di manual artifacts.

The ``manual`` console script defined here expands ``llms.txt`` into
``llms-full.txt``, merges each language's pages into a single-page manual,
and copies the cleaned markdown sources into the built site. Every command
works with no flags from the documentation project root; paths come from
``config/manual.yaml`` when present and from built-in defaults otherwise.

Exit status is zero whenever the outputs were written, even if individual
pages were skipped (each skip is logged). A missing index file, language
directory or config file, an unknown language, or an invalid setting exits
with status 1.

Examples
--------
Regenerate everything from the project root:

>>> from raydi_manual.cli import main
>>> main()  # doctest: +SKIP

Rebuild only the Japanese single-page manual:

>>> from raydi_manual.cli import app
>>> app(["one-page", "--language", "ja"])  # doctest: +SKIP
"""

from __future__ import annotations

import contextlib
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ManualConfig, ManualConfigError, load_manual_config
from .llms_full import LlmsFullBuilder
from .logging_config import configure_logging
from .markdown_export import export_markdown
from .models import ManualSourceError
from .one_page import OnePageBuilder

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_ROOT = Path(".")

logger = logging.getLogger(__name__)

app = App(name="manual", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

RootOption = typ.Annotated[
    Path, Parameter(help="Documentation project root", env_var="INPUT_ROOT")
]
ConfigOption = typ.Annotated[
    Path | None,
    Parameter(
        help="Path to the manual config (defaults to config/manual.yaml when present)",
        env_var="INPUT_CONFIG",
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(root: Path, config: Path | None) -> ManualConfig:
    configure_logging()
    return load_manual_config(root, config)


@contextlib.contextmanager
def _exit_on_error() -> cabc.Iterator[None]:
    """Turn a missing input or invalid setting into a logged error and exit status 1."""
    try:
        yield
    except (FileNotFoundError, ManualConfigError) as exc:
        logger.error("Error: %s", exc)
        raise SystemExit(1) from exc


def _write_llms_full(manual_config: ManualConfig) -> None:
    path = LlmsFullBuilder(manual_config).run()
    print(f"wrote {_format_path(path)}")


def _write_one_page(
    manual_config: ManualConfig, languages: cabc.Iterable[str] | None = None
) -> None:
    for path in OnePageBuilder(manual_config).run(languages):
        print(f"wrote {_format_path(path)}")


@app.command(help="Expand llms.txt into llms-full.txt with every linked page inlined.")
def llms_full(
    *,
    root: RootOption = DEFAULT_ROOT,
    config: ConfigOption = None,
) -> None:
    """Write ``llms-full.txt`` next to ``llms.txt``.

    Parameters
    ----------
    root : Path, optional
        Documentation project root; defaults to the current directory.
    config : Path or None, optional
        Configuration file overriding ``config/manual.yaml``.

    Raises
    ------
    SystemExit
        With status 1 when ``llms.txt`` or the config file is missing, or a
        setting is invalid.
    """
    with _exit_on_error():
        manual_config = _load_config(root, config)
        _write_llms_full(manual_config)


@app.command(help="Merge each language's manual pages into a single page.")
def one_page(
    *,
    root: RootOption = DEFAULT_ROOT,
    config: ConfigOption = None,
    language: typ.Annotated[
        str | None,
        Parameter(help="Only build this language", env_var="INPUT_LANGUAGE"),
    ] = None,
) -> None:
    """Write ``manuals/<version>/<language>/1page.md`` for each language.

    Parameters
    ----------
    root : Path, optional
        Documentation project root; defaults to the current directory.
    config : Path or None, optional
        Configuration file overriding ``config/manual.yaml``.
    language : str or None, optional
        Language code to build; all configured languages when ``None``.

    Raises
    ------
    SystemExit
        With status 1 when a language is unknown or its source directory is
        missing.
    """
    languages = [language] if language else None
    with _exit_on_error():
        manual_config = _load_config(root, config)
        _write_one_page(manual_config, languages)


@app.command(
    name="export-markdown",
    help="Copy manual markdown into the built site without front-matter.",
)
def export_markdown_files(
    *,
    root: RootOption = DEFAULT_ROOT,
    config: ConfigOption = None,
    site_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the built site directory", env_var="INPUT_SITE_DIR"),
    ] = None,
) -> None:
    """Mirror ``manuals/**/*.md`` into ``<site_dir>/manuals/``."""
    with _exit_on_error():
        manual_config = _load_config(root, config)
        source_dir = manual_config.resolve(manual_config.manuals_dir)
        site = manual_config.resolve(site_dir or manual_config.site_dir)
        written = export_markdown(source_dir, site / manual_config.manuals_dir.name)
    print(f"wrote {len(written)} file(s) under {_format_path(site)}")


@app.command(help="Build llms-full.txt and every single-page manual.")
def generate(
    *,
    root: RootOption = DEFAULT_ROOT,
    config: ConfigOption = None,
) -> None:
    """Run ``llms-full`` and ``one-page`` in one invocation.

    Both steps run even when the first one fails; the exit status is 1 if
    either reported a missing source.
    """
    with _exit_on_error():
        manual_config = _load_config(root, config)
    failed = False
    for step in (_write_llms_full, _write_one_page):
        try:
            step(manual_config)
        except ManualSourceError as exc:
            logger.error("Error: %s", exc)
            failed = True
    if failed:
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``manual`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
