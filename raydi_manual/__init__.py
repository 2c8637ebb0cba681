"""Build tooling for the Ray.Di manual site.

This package exposes the CLI entry points used by the site's CI to expand
``llms.txt`` into ``llms-full.txt``, merge each language's manual into a
single page, and publish the cleaned markdown sources.

Exports
-------
- ``app``: Cyclopts application with the ``manual`` subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from raydi_manual import main
>>> main()  # doctest: +SKIP
>>> from raydi_manual import app
>>> app(["one-page", "--language", "en"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
